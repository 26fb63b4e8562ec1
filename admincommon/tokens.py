"""JSON Web Token helpers."""

from __future__ import annotations

from typing import Any

import jwt


def new_jwt_token(secret_key: str, iat: int, seconds: int, **kwargs: Any) -> str:
    """Return an HS256 token issued at ``iat`` and valid for ``seconds``.

    Extra keyword arguments become additional claims.
    """
    claims: dict[str, Any] = {"exp": iat + seconds, "iat": iat}
    claims.update(kwargs)
    return jwt.encode(claims, secret_key, algorithm="HS256")


def strip_bearer_prefix(token: str) -> str:
    """Remove a case-insensitive ``Bearer `` prefix from ``token``."""
    if len(token) > 6 and token[:7].upper() == "BEARER ":
        return token[7:]
    return token