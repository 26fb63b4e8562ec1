"""Data permission values carried in request contexts, and their redis keys."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum

from .enums import DataPerm
from .errors import InvalidArgumentError
from .messages import REDIS_DATA_PERMISSION_PREFIX
from .reqctx import Context, _atoi, _context_string

logger = logging.getLogger(__name__)

_UINT64_MASK = (1 << 64) - 1
_UINT8_MASK = 0xFF


class DataPermKey(str, Enum):
    """Context keys for data permission values."""

    SCOPE = "data-perm-scope"
    CUSTOM_DEPT = "data-perm-custom-dept"
    SUB_DEPT = "data-perm-sub-dept"
    FILTER_FIELD = "data-perm-filter-field"


def _with(ctx: Context, key: DataPermKey, value: str) -> Context:
    return ctx.append_outgoing(key.value, value).with_value(key, value)


def _get_id_list(ctx: Context, key: DataPermKey, description: str) -> list[int]:
    message = f"failed to get {description}"
    text = _context_string(ctx, key, key.value, description)
    if text is None:
        raise InvalidArgumentError(message)
    ids: list[int] = []
    for part in text.split(","):
        try:
            ids.append(_atoi(part) & _UINT64_MASK)
        except ValueError as exc:
            logger.error("failed to convert %s: %s (data %r)", description, exc, part)
            raise InvalidArgumentError(message) from exc
    return ids


def with_scope(ctx: Context, scope: str | DataPerm) -> Context:
    """Return a context carrying the data scope, locally and downstream."""
    text = scope.text() if isinstance(scope, DataPerm) else scope
    return _with(ctx, DataPermKey.SCOPE, text)


def get_scope(ctx: Context) -> int:
    """Return the data scope; raise InvalidArgumentError when missing or invalid."""
    text = _context_string(ctx, DataPermKey.SCOPE, DataPermKey.SCOPE.value, "data scope")
    if text is None:
        raise InvalidArgumentError("failed to get data scope")
    try:
        number = _atoi(text)
    except ValueError as exc:
        logger.error("failed to convert data scope: %s", exc)
        raise InvalidArgumentError("failed to get data scope") from exc
    return number & _UINT8_MASK


def with_custom_dept(ctx: Context, dept_ids: str) -> Context:
    """Return a context carrying comma-separated custom department ids."""
    return _with(ctx, DataPermKey.CUSTOM_DEPT, dept_ids)


def get_custom_dept(ctx: Context) -> list[int]:
    """Return the custom department ids; raise InvalidArgumentError on failure."""
    return _get_id_list(ctx, DataPermKey.CUSTOM_DEPT, "custom departmrnt ids")


def with_sub_dept(ctx: Context, dept_ids: str) -> Context:
    """Return a context carrying comma-separated sub department ids."""
    return _with(ctx, DataPermKey.SUB_DEPT, dept_ids)


def get_sub_dept(ctx: Context) -> list[int]:
    """Return the sub department ids; raise InvalidArgumentError on failure."""
    return _get_id_list(ctx, DataPermKey.SUB_DEPT, "sub departmrnt ids")


def with_filter_field(ctx: Context, filter_field: str) -> Context:
    """Return a context carrying the filter field name."""
    return _with(ctx, DataPermKey.FILTER_FIELD, filter_field)


def get_filter_field(ctx: Context) -> str:
    """Return the filter field; raise InvalidArgumentError when missing."""
    text = _context_string(
        ctx, DataPermKey.FILTER_FIELD, DataPermKey.FILTER_FIELD.value, "filter field"
    )
    if text is None:
        raise InvalidArgumentError("failed to get filter field")
    return text


def role_custom_dept_key(role_codes: Iterable[str]) -> str:
    """Return the redis key of the roles' custom department data."""
    return f"{REDIS_DATA_PERMISSION_PREFIX}ROLE:{','.join(role_codes)}:CustomDept"


def role_scope_key(role_codes: Iterable[str]) -> str:
    """Return the redis key of the roles' data scope."""
    return f"{REDIS_DATA_PERMISSION_PREFIX}ROLE:{','.join(role_codes)}:Scope"


def sub_dept_key(department_id: int) -> str:
    """Return the redis key of a department's sub department data."""
    return f"{REDIS_DATA_PERMISSION_PREFIX}DEPT:{department_id}:SubDept"


def tenant_role_custom_dept_key(role_codes: Iterable[str], tenant_id: int) -> str:
    """Return the redis key of a tenant's roles' custom department data."""
    return f"{REDIS_DATA_PERMISSION_PREFIX}{tenant_id}:ROLE:{','.join(role_codes)}:CustomDept"


def tenant_role_scope_key(role_codes: Iterable[str], tenant_id: int) -> str:
    """Return the redis key of a tenant's roles' data scope."""
    return f"{REDIS_DATA_PERMISSION_PREFIX}{tenant_id}:ROLE:{','.join(role_codes)}:Scope"


def tenant_sub_dept_key(department_id: int, tenant_id: int) -> str:
    """Return the redis key of a tenant's department's sub department data."""
    return f"{REDIS_DATA_PERMISSION_PREFIX}{tenant_id}:DEPT:{department_id}:SubDept"