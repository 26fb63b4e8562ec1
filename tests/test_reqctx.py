import pytest

from admincommon.enums import TENANT_DEFAULT_ID
from admincommon.errors import InvalidArgumentError
from admincommon.reqctx import (
    DEPARTMENT_ID_RPC_KEY,
    ROLE_ID_RPC_KEY,
    TENANT_ADMIN_KEY,
    TENANT_ID_KEY,
    USER_ID_RPC_KEY,
    Context,
    admin_ctx,
    get_department_id,
    get_role_ids,
    get_tenant_id,
    get_user_id,
    is_tenant_admin,
)


def test_with_value_leaves_original_untouched():
    base = Context()
    derived = base.with_value("k", "v")
    assert derived.value("k") == "v"
    assert base.value("k") is None


def test_incoming_metadata_keys_are_lowercased():
    ctx = Context().with_incoming_metadata({"Some-Key": "a", "multi": ["x", "y"]})
    assert ctx.incoming("some-key") == ["a"]
    assert ctx.incoming("SOME-KEY") == ["a"]
    assert ctx.incoming("multi") == ["x", "y"]
    assert ctx.incoming("missing") == []


def test_append_outgoing_accumulates():
    ctx = Context().append_outgoing("k", "1").append_outgoing("k", "2")
    assert ctx.outgoing("k") == ["1", "2"]
    assert Context().outgoing("k") == []


# Department


def test_department_empty_context_raises():
    with pytest.raises(InvalidArgumentError) as info:
        get_department_id(Context())
    assert str(info.value) == "failed to get department ID"


def test_department_string_value_is_not_a_number():
    with pytest.raises(InvalidArgumentError):
        get_department_id(Context().with_value("deptId", ""))


def test_department_numeric_value():
    assert get_department_id(Context().with_value("deptId", 12)) == 12


def test_department_from_metadata():
    ctx = Context().with_incoming_metadata({DEPARTMENT_ID_RPC_KEY: "7"})
    assert get_department_id(ctx) == 7


def test_department_invalid_metadata_raises():
    ctx = Context().with_incoming_metadata({DEPARTMENT_ID_RPC_KEY: "abc"})
    with pytest.raises(InvalidArgumentError):
        get_department_id(ctx)


# Role


def test_role_empty_context_raises():
    with pytest.raises(InvalidArgumentError) as info:
        get_role_ids(Context())
    assert str(info.value) == "failed to get role id from context"


def test_role_from_value():
    assert get_role_ids(Context().with_value("roleId", "001,002")) == ["001", "002"]


def test_role_from_metadata():
    ctx = Context().with_incoming_metadata({ROLE_ID_RPC_KEY: "001,002"})
    assert get_role_ids(ctx) == ["001", "002"]


def test_role_ids_are_sorted():
    assert get_role_ids(Context().with_value("roleId", "c,a,b")) == ["a", "b", "c"]


# Tenant


@pytest.mark.parametrize(
    "ctx, expected",
    [
        (Context().with_value(TENANT_ID_KEY, "10"), 10),
        (Context(), TENANT_DEFAULT_ID),
        (Context().with_incoming_metadata({TENANT_ID_KEY: "10"}), 10),
        (Context().with_value(TENANT_ID_KEY, "x"), TENANT_DEFAULT_ID),
        (Context().with_incoming_metadata({}), TENANT_DEFAULT_ID),
    ],
)
def test_get_tenant_id(ctx, expected):
    assert get_tenant_id(ctx) == expected


@pytest.mark.parametrize(
    "ctx, expected",
    [
        (Context().with_value(TENANT_ADMIN_KEY, "allow"), True),
        (Context().with_value(TENANT_ADMIN_KEY, "allowing"), False),
        (Context(), False),
        (admin_ctx(Context()), True),
        (Context().with_incoming_metadata({TENANT_ADMIN_KEY: "allow"}), True),
        (Context().with_incoming_metadata({TENANT_ADMIN_KEY: "deny"}), False),
    ],
)
def test_is_tenant_admin(ctx, expected):
    assert is_tenant_admin(ctx) is expected


def test_admin_ctx_sets_outgoing_metadata():
    ctx = admin_ctx(Context())
    assert ctx.outgoing(TENANT_ADMIN_KEY) == ["allow"]


# User


def test_user_empty_context_raises():
    with pytest.raises(InvalidArgumentError) as info:
        get_user_id(Context())
    assert str(info.value) == "failed to get user id from context"


def test_user_from_value():
    assert get_user_id(Context().with_value("userId", "asdfghjkl")) == "asdfghjkl"


def test_user_from_metadata():
    ctx = Context().with_incoming_metadata({USER_ID_RPC_KEY: "asdfghjkl"})
    assert get_user_id(ctx) == "asdfghjkl"


def test_user_missing_from_metadata_raises():
    with pytest.raises(InvalidArgumentError):
        get_user_id(Context().with_incoming_metadata({}))