"""Configuration of the redis-backed task queue."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from .config import RedisConf


@dataclass
class AsynqConf:
    """Task queue settings: redis connection, worker concurrency and sync interval."""

    addr: str = "127.0.0.1:6379"
    username: str = ""
    password: str = ""
    db: int = 0
    # Maximum number of tasks processed at once.
    concurrency: int = 20
    # Seconds between periodic task configuration syncs.
    sync_interval: int = 10
    enable: bool = True

    def with_redis_conf(self, redis_conf: RedisConf) -> AsynqConf:
        """Take the connection settings from ``redis_conf`` and return self."""
        self.password = redis_conf.password
        self.addr = redis_conf.host
        self.username = redis_conf.username
        self.db = redis_conf.db
        return self

    def redis_options(self) -> dict[str, Any]:
        """Return the redis client options of this configuration."""
        return {
            "network": "tcp",
            "addr": self.addr,
            "username": self.username,
            "password": self.password,
            "db": self.db,
        }

    @property
    def sync_period(self) -> timedelta:
        """The sync interval as a duration."""
        return timedelta(seconds=self.sync_interval)