"""Captcha configuration and a redis-backed captcha answer store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

import redis

from .messages import REDIS_CAPTCHA_PREFIX

logger = logging.getLogger(__name__)

CAPTCHA_EXPIRATION = timedelta(minutes=5)
CAPTCHA_DRIVERS = ("digit", "string", "math", "chinese")


@dataclass
class CaptchaConf:
    """Captcha length, image size and driver type."""

    key_long: int = 5
    img_width: int = 240
    img_height: int = 80
    driver: str = "digit"

    def __post_init__(self) -> None:
        if self.driver not in CAPTCHA_DRIVERS:
            raise ValueError(f"captcha driver must be one of {CAPTCHA_DRIVERS}: {self.driver!r}")


@dataclass
class RedisStore:
    """Stores captcha answers in redis under a key prefix, with expiry."""

    client: Any
    expiration: timedelta = CAPTCHA_EXPIRATION
    prefix: str = REDIS_CAPTCHA_PREFIX

    def set(self, captcha_id: str, value: str) -> None:
        """Store the answer of ``captcha_id``."""
        try:
            self.client.set(self.prefix + captcha_id, value, ex=self.expiration)
        except redis.RedisError as exc:
            logger.error("error occurs when captcha key sets to redis: %s", exc)
            raise

    def get(self, key: str, clear: bool) -> str:
        """Return the value under the full ``key``, deleting it if ``clear``.

        Any failure, including a missing key, yields an empty string.
        """
        try:
            value = self.client.get(key)
        except redis.RedisError as exc:
            logger.error("error occurs when captcha key gets from redis: %s", exc)
            return ""
        if value is None:
            logger.error("error occurs when captcha key gets from redis: %s is missing", key)
            return ""
        if clear:
            try:
                self.client.delete(key)
            except redis.RedisError as exc:
                logger.error("error occurs when captcha key deletes from redis: %s", exc)
                return ""
        return value.decode("utf-8") if isinstance(value, bytes) else str(value)

    def verify(self, captcha_id: str, answer: str, clear: bool) -> bool:
        """Return True when ``answer`` equals the stored answer of ``captcha_id``."""
        return self.get(self.prefix + captcha_id, clear) == answer


def new_redis_store(client: Any) -> RedisStore:
    """Return a captcha store on ``client`` with the default prefix and expiry."""
    return RedisStore(client)