"""Conversions between optional wire values and richer Python values."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Milliseconds since the Unix epoch of 0001-01-01T00:00:00Z, the zero time.
ZERO_TIME_UNIX_MILLI = -62135596800000


def to_status(value: int | None) -> int | None:
    """Narrow an RPC status value to an unsigned byte; ``None`` stays ``None``."""
    if value is None:
        return None
    return value & 0xFF


def time_from_unix(value: int | None, nsec: int = 0) -> datetime | None:
    """Return the UTC time ``value`` seconds plus ``nsec`` nanoseconds after the epoch.

    Precision below a microsecond is dropped. ``None`` yields ``None``.
    """
    if value is None:
        return None
    micros = nsec // 1000 if nsec >= 0 else -((-nsec) // 1000)
    return _EPOCH + timedelta(seconds=value, microseconds=micros)


def time_from_unix_milli(value: int | None) -> datetime | None:
    """Return the UTC time ``value`` milliseconds after the epoch, or ``None``."""
    if value is None:
        return None
    return _EPOCH + timedelta(milliseconds=value)


def unix_milli_or_none(value: int) -> int | None:
    """Return ``value`` unless it is the Unix milliseconds of the zero time."""
    if value == ZERO_TIME_UNIX_MILLI:
        return None
    return value