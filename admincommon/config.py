"""Configuration of cross-origin access, SQL databases and redis."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import redis
import redis.cluster
import redis.sentinel

logger = logging.getLogger(__name__)

_DEFAULT_REDIS_PORT = 6379
_READ_TIMEOUT = 3.0
_DIAL_TIMEOUT = 5.0


@dataclass
class CorsConf:
    """Cross-origin configuration."""

    address: str = ""


@dataclass
class DatabaseConf:
    """SQL database configuration."""

    host: str = ""
    port: int = 0
    username: str = "root"
    password: str = ""
    db_name: str = "simple_admin"
    ssl_mode: str = ""
    type: str = "mysql"
    max_open_conn: int = 100
    cache_time: int = 10
    db_path: str = ""
    mysql_config: str = ""
    pg_config: str = ""
    sqlite_config: str = ""

    def mysql_dsn(self) -> str:
        """Return the MySQL DSN."""
        return (
            f"{self.username}:{self.password}@tcp({self.host}:{self.port})/"
            f"{self.db_name}?parseTime=True{self.mysql_config}"
        )

    def postgres_dsn(self) -> str:
        """Return the PostgreSQL DSN."""
        return (
            f"postgresql://{self.username}:{self.password}@{self.host}:{self.port}/"
            f"{self.db_name}?sslmode={self.ssl_mode}{self.pg_config}"
        )

    def sqlite_dsn(self) -> str:
        """Return the SQLite DSN, creating the database file if it is missing."""
        path = self.db_path
        if not path:
            raise ValueError("the database file path cannot be empty")
        if not os.path.exists(path):
            try:
                fd = os.open(path, os.O_CREAT | os.O_RDWR, 0o600)
                os.close(fd)
            except OSError as exc:
                raise OSError(f"failed to create SQLite database file {path!r}") from exc
        else:
            try:
                os.chmod(path, 0o660)
            except OSError as exc:
                raise OSError(f"unable to set permission code on {path}: {exc}") from exc
        return f"file:{path}?_busy_timeout=100000&_fk=1{self.sqlite_config}"

    def get_dsn(self) -> str:
        """Return the DSN for the configured database type."""
        if self.type == "mysql":
            return self.mysql_dsn()
        if self.type == "postgres":
            return self.postgres_dsn()
        if self.type == "sqlite3":
            return self.sqlite_dsn()
        return "mysql"


def _split_address(address: str) -> tuple[str, int]:
    address = address.strip()
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        return address, _DEFAULT_REDIS_PORT
    return host.strip("[]"), int(port)


@dataclass
class RedisConf:
    """Redis configuration; ``host`` may list several comma-separated addresses."""

    host: str = ""
    db: int = 0
    username: str = ""
    password: str = ""
    tls: bool = False
    master: str = ""

    def validate(self) -> None:
        """Raise ValueError when the configuration cannot be used."""
        if not self.host:
            raise ValueError("host cannot be empty")

    def _connection_kwargs(self) -> dict:
        # Python's default TLS context already refuses versions below 1.2.
        return {
            "username": self.username or None,
            "password": self.password or None,
            "ssl": self.tls,
            "socket_timeout": _READ_TIMEOUT,
            "socket_connect_timeout": _DIAL_TIMEOUT,
        }

    def new_universal_redis(self):
        """Return a connected client: sentinel, cluster or single node.

        A master name selects sentinel failover, several addresses select a
        cluster, otherwise a single node is used. The client is pinged first.
        """
        self.validate()
        addresses = [_split_address(part) for part in self.host.split(",")]
        kwargs = self._connection_kwargs()

        if self.master:
            sentinel = redis.sentinel.Sentinel(
                addresses,
                sentinel_kwargs={
                    "ssl": self.tls,
                    "socket_timeout": _READ_TIMEOUT,
                    "socket_connect_timeout": _DIAL_TIMEOUT,
                },
                db=self.db,
                **kwargs,
            )
            client = sentinel.master_for(self.master)
        elif len(addresses) > 1:
            nodes = [redis.cluster.ClusterNode(host, port) for host, port in addresses]
            client = redis.cluster.RedisCluster(startup_nodes=nodes, **kwargs)
        else:
            host, port = addresses[0]
            client = redis.Redis(host=host, port=port, db=self.db, **kwargs)

        client.ping()
        return client

    def must_new_universal_redis(self):
        """Like :meth:`new_universal_redis`, logging the failure before raising."""
        try:
            return self.new_universal_redis()
        except Exception as exc:
            logger.error("failed to create redis client: %s", exc)
            raise