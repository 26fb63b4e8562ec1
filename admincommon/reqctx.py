"""Request context carrying values and RPC metadata, with identity lookups."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from .enums import TENANT_DEFAULT_ID
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DEPARTMENT_ID_CTX_KEY = "deptId"
ROLE_ID_CTX_KEY = "roleId"
USER_ID_CTX_KEY = "userId"

DEPARTMENT_ID_RPC_KEY = "deptid"
ROLE_ID_RPC_KEY = "roleid"
USER_ID_RPC_KEY = "userid"
TENANT_ID_KEY = "tenant-id"

TENANT_ADMIN_KEY = "tenant-admin"
TENANT_ADMIN_ALLOW = "allow"

_INTEGER = re.compile(r"^[+-]?[0-9]+$")
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_UINT64_MASK = (1 << 64) - 1
_UINT8_MASK = 0xFF


class Context:
    """An immutable request context.

    It holds plain values, the metadata received with the request and the
    metadata to send with outgoing calls. Every ``with_*`` and
    ``append_outgoing`` call returns a new context and leaves this one as is.
    """

    __slots__ = ("_values", "_incoming", "_outgoing")

    def __init__(self) -> None:
        self._values: dict[Any, Any] = {}
        self._incoming: dict[str, tuple[str, ...]] | None = None
        self._outgoing: dict[str, tuple[str, ...]] = {}

    def _clone(self) -> Context:
        new = Context()
        new._values = self._values
        new._incoming = self._incoming
        new._outgoing = self._outgoing
        return new

    def with_value(self, key: Any, value: Any) -> Context:
        """Return a context in which ``key`` maps to ``value``."""
        new = self._clone()
        new._values = {**self._values, key: value}
        return new

    def value(self, key: Any) -> Any:
        """Return the value stored under ``key``, or ``None``."""
        return self._values.get(key)

    def with_incoming_metadata(self, metadata: Mapping[str, str | Iterable[str]]) -> Context:
        """Return a context whose incoming metadata is ``metadata``.

        Keys are lower-cased; a value may be a single string or several.
        """
        normalized: dict[str, tuple[str, ...]] = {}
        for key, raw in metadata.items():
            values = (raw,) if isinstance(raw, str) else tuple(raw)
            lowered = key.lower()
            normalized[lowered] = normalized.get(lowered, ()) + values
        new = self._clone()
        new._incoming = normalized
        return new

    def incoming(self, key: str) -> list[str]:
        """Return the incoming metadata values under ``key``."""
        if self._incoming is None:
            return []
        return list(self._incoming.get(key.lower(), ()))

    def append_outgoing(self, key: str, value: str) -> Context:
        """Return a context with ``value`` appended to the outgoing ``key``."""
        lowered = key.lower()
        new = self._clone()
        new._outgoing = {**self._outgoing, lowered: self._outgoing.get(lowered, ()) + (value,)}
        return new

    def outgoing(self, key: str) -> list[str]:
        """Return the outgoing metadata values under ``key``."""
        return list(self._outgoing.get(key.lower(), ()))

    def _has_incoming(self) -> bool:
        return self._incoming is not None

    def __repr__(self) -> str:
        return (
            f"Context(values={self._values!r}, incoming={self._incoming!r}, "
            f"outgoing={self._outgoing!r})"
        )


def _atoi(text: str) -> int:
    """Parse a signed 64-bit decimal integer strictly."""
    if not _INTEGER.match(text):
        raise ValueError(f"invalid syntax: {text!r}")
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"value out of range: {text!r}")
    return number


def _context_string(
    ctx: Context,
    value_key: Any,
    metadata_key: str,
    description: str | None,
    accept: type = str,
) -> str | None:
    """Return a string from the context value or, failing that, the incoming metadata."""
    value = ctx.value(value_key)
    if isinstance(value, accept) and not isinstance(value, bool):
        return str(value)
    if not ctx._has_incoming():
        if description is not None:
            logger.error("failed to get %s from context: %r", description, ctx)
        return None
    data = ctx.incoming(metadata_key)
    return data[0] if data else None


def get_department_id(ctx: Context) -> int:
    """Return the department id of the request.

    The context value must be a decoded JSON number; otherwise the incoming
    metadata is consulted. Raises InvalidArgumentError when it is missing or
    not an integer.
    """
    text = _context_string(
        ctx, DEPARTMENT_ID_CTX_KEY, DEPARTMENT_ID_RPC_KEY, "department id", accept=int
    )
    if text is None:
        raise InvalidArgumentError("failed to get department ID")
    try:
        number = _atoi(text)
    except ValueError as exc:
        logger.error("failed to convert department id: %s", exc)
        raise InvalidArgumentError("failed to get department ID") from exc
    return number & _UINT64_MASK


def get_role_ids(ctx: Context) -> list[str]:
    """Return the sorted role codes of the request.

    Raises InvalidArgumentError when they are missing.
    """
    text = _context_string(ctx, ROLE_ID_CTX_KEY, ROLE_ID_RPC_KEY, "role id")
    if text is None:
        raise InvalidArgumentError("failed to get role id from context")
    return sorted(text.split(","))


def get_tenant_id(ctx: Context) -> int:
    """Return the tenant id of the request, or the default tenant id on any failure."""
    text = _context_string(ctx, TENANT_ID_KEY, TENANT_ID_KEY, "tenant id")
    if text is None:
        return TENANT_DEFAULT_ID
    try:
        number = _atoi(text)
    except ValueError as exc:
        logger.error("failed to convert tenant id: %s", exc)
        return TENANT_DEFAULT_ID
    return number & _UINT64_MASK


def is_tenant_admin(ctx: Context) -> bool:
    """Return True when the context grants access across tenants."""
    policy = _context_string(ctx, TENANT_ADMIN_KEY, TENANT_ADMIN_KEY, None)
    return policy == TENANT_ADMIN_ALLOW


def admin_ctx(ctx: Context) -> Context:
    """Return a context that grants access across tenants, locally and downstream."""
    return ctx.append_outgoing(TENANT_ADMIN_KEY, TENANT_ADMIN_ALLOW).with_value(
        TENANT_ADMIN_KEY, TENANT_ADMIN_ALLOW
    )


def get_user_id(ctx: Context) -> str:
    """Return the user id of the request.

    Raises InvalidArgumentError when it is missing.
    """
    text = _context_string(ctx, USER_ID_CTX_KEY, USER_ID_RPC_KEY, "user id")
    if text is None:
        raise InvalidArgumentError("failed to get user id from context")
    return text