"""UUID generation (version 7) and lenient parsing helpers."""

from __future__ import annotations

import logging
import secrets
import threading
import time
import uuid
from collections.abc import Iterable

logger = logging.getLogger(__name__)

NIL_UUID = uuid.UUID(int=0)

_lock = threading.Lock()
_last_ms = 0
_sequence = 0
_SEQ_MAX = 0xFFF


def _next_timestamp() -> tuple[int, int]:
    """Return a millisecond timestamp and a 12-bit sequence that only grow."""
    global _last_ms, _sequence
    now_ms = time.time_ns() // 1_000_000
    with _lock:
        if now_ms > _last_ms:
            _last_ms = now_ms
            _sequence = secrets.randbits(10)
        else:
            _sequence += 1
            if _sequence > _SEQ_MAX:
                _last_ms += 1
                _sequence = 0
        return _last_ms, _sequence


def new_uuid() -> uuid.UUID:
    """Return a new time-ordered version 7 UUID."""
    ms, seq = _next_timestamp()
    value = (ms & ((1 << 48) - 1)) << 80
    value |= 0x7 << 76
    value |= seq << 64
    value |= 0b10 << 62
    value |= secrets.randbits(62)
    return uuid.UUID(int=value)


def _parse(value: object) -> uuid.UUID:
    if not isinstance(value, str):
        raise ValueError(f"uuid: cannot parse {value!r}")
    return uuid.UUID(value)


def parse_uuid(value: str) -> uuid.UUID:
    """Parse ``value``; an invalid string yields the nil UUID."""
    try:
        return _parse(value)
    except ValueError as exc:
        logger.error("fail to parse string to UUID: %s", exc)
        return NIL_UUID


def parse_uuid_list(ids: Iterable[str]) -> list[uuid.UUID] | None:
    """Parse every id; return ``None`` if any of them is invalid."""
    result: list[uuid.UUID] = []
    for item in ids:
        try:
            result.append(_parse(item))
        except ValueError as exc:
            logger.error("fail to parse string to UUID: %s", exc)
            return None
    return result


def parse_optional_uuid(value: str | None) -> uuid.UUID | None:
    """Parse ``value``; ``None`` or an invalid string yields ``None``."""
    if value is None:
        return None
    try:
        return _parse(value)
    except ValueError as exc:
        logger.error("fail to parse string to UUID: %s", exc)
        return None