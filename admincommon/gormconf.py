"""Relational database connection settings with log level selection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

logger = logging.getLogger(__name__)


class LogLevel(IntEnum):
    """SQL logger verbosity."""

    SILENT = 1
    ERROR = 2
    WARN = 3
    INFO = 4


_LEVELS = {
    "info": LogLevel.INFO,
    "warn": LogLevel.WARN,
    "error": LogLevel.ERROR,
    "silent": LogLevel.SILENT,
}


def get_log_level(log_mode: str) -> LogLevel:
    """Return the logger level for a mode name; unknown names give ERROR."""
    return _LEVELS.get(log_mode, LogLevel.ERROR)


def _log_sql_message(message: str, *args: object) -> None:
    """Write a SQL logger line at error level."""
    logger.error(message, *args)


@dataclass
class GormConf:
    """Connection settings for MySQL or PostgreSQL."""

    type: str = "mysql"
    host: str = "localhost"
    port: int = 3306
    config: str = ""
    db_name: str = "simple_admin"
    username: str = "root"
    password: str = ""
    max_idle_conn: int = 10
    max_open_conn: int = 100
    log_mode: str = "error"

    def mysql_dsn(self) -> str:
        """Return the MySQL DSN."""
        return (
            f"{self.username}:{self.password}@tcp({self.host}:{self.port})/"
            f"{self.db_name}?{self.config}"
        )

    def postgres_dsn(self) -> str:
        """Return the PostgreSQL key/value DSN."""
        return (
            f"host={self.host} user={self.username} password={self.password} "
            f"dbname={self.db_name} port={self.port} {self.config}"
        )

    def log_level(self) -> LogLevel:
        """Return the logger level for the configured log mode."""
        return get_log_level(self.log_mode)