"""Shared enumerations: record status, gRPC-style error codes and data permissions."""

from __future__ import annotations

from enum import IntEnum

DEFAULT_PARENT_ID = 1000000
# A token whose role id equals this value does not belong to the core service.
DEFAULT_INVALID_ROLE_ID = 1000000

TENANT_DEFAULT_ID = 1


class Status(IntEnum):
    """Status of a record."""

    NORMAL = 1
    BANNED = 2


class ErrorCode(IntEnum):
    """Canonical RPC status codes."""

    OK = 0
    CANCELED = 1
    UNKNOWN = 2
    INVALID_ARGUMENT = 3
    DEADLINE_EXCEEDED = 4
    NOT_FOUND = 5
    ALREADY_EXISTS = 6
    PERMISSION_DENIED = 7
    RESOURCE_EXHAUSTED = 8
    FAILED_PRECONDITION = 9
    ABORTED = 10
    OUT_OF_RANGE = 11
    UNIMPLEMENTED = 12
    INTERNAL = 13
    UNAVAILABLE = 14
    DATA_LOSS = 15
    UNAUTHENTICATED = 16


class DataPerm(IntEnum):
    """Data permission scopes."""

    ALL = 1
    CUSTOM_DEPT = 2
    OWN_DEPT_AND_SUB = 3
    OWN_DEPT = 4
    SELF = 5

    @classmethod
    def parse(cls, text: str) -> "DataPerm":
        """Return the scope written as a decimal string such as ``"1"``."""
        try:
            return cls(int(text))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"invalid data permission scope: {text!r}") from exc

    def text(self) -> str:
        """Return the scope as the decimal string used on the wire."""
        return str(int(self))