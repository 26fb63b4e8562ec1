"""Password hashing with bcrypt."""

from __future__ import annotations

import bcrypt

DEFAULT_COST = 10
_MAX_PASSWORD_BYTES = 72


def bcrypt_encrypt(password: str) -> str:
    """Hash ``password`` with bcrypt at the default cost."""
    raw = password.encode("utf-8")
    if len(raw) > _MAX_PASSWORD_BYTES:
        raise ValueError("bcrypt: password length exceeds 72 bytes")
    salt = bcrypt.gensalt(rounds=DEFAULT_COST, prefix=b"2a")
    return bcrypt.hashpw(raw, salt).decode("ascii")


def bcrypt_check(password: str, hashed: str) -> bool:
    """Return True when ``password`` matches the bcrypt ``hashed`` value."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False