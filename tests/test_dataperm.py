import pytest

from admincommon.dataperm import (
    DataPermKey,
    get_custom_dept,
    get_filter_field,
    get_scope,
    get_sub_dept,
    role_custom_dept_key,
    role_scope_key,
    sub_dept_key,
    tenant_role_custom_dept_key,
    tenant_role_scope_key,
    tenant_sub_dept_key,
    with_custom_dept,
    with_filter_field,
    with_scope,
    with_sub_dept,
)
from admincommon.enums import DataPerm
from admincommon.errors import InvalidArgumentError
from admincommon.reqctx import Context


def _incoming(key, value):
    return Context().with_incoming_metadata({key.value: value})


# Scope


def test_scope_from_metadata():
    assert get_scope(_incoming(DataPermKey.SCOPE, "1")) == DataPerm.ALL


def test_scope_empty_metadata_raises():
    with pytest.raises(InvalidArgumentError) as info:
        get_scope(Context().with_incoming_metadata({}))
    assert str(info.value) == "failed to get data scope"


def test_scope_from_value():
    assert get_scope(Context().with_value(DataPermKey.SCOPE, "1")) == DataPerm.ALL


def test_scope_invalid_raises():
    with pytest.raises(InvalidArgumentError):
        get_scope(Context().with_value(DataPermKey.SCOPE, "all"))


def test_with_scope_round_trip_and_outgoing():
    ctx = with_scope(Context(), DataPerm.OWN_DEPT)
    assert get_scope(ctx) == 4
    assert ctx.outgoing(DataPermKey.SCOPE.value) == ["4"]


# Custom department


def test_custom_dept_from_metadata():
    assert get_custom_dept(_incoming(DataPermKey.CUSTOM_DEPT, "1,3,20,8")) == [1, 3, 20, 8]


def test_custom_dept_empty_metadata_raises():
    with pytest.raises(InvalidArgumentError):
        get_custom_dept(Context().with_incoming_metadata({}))


def test_custom_dept_from_value():
    ctx = Context().with_value(DataPermKey.CUSTOM_DEPT, "1,3,20,8")
    assert get_custom_dept(ctx) == [1, 3, 20, 8]


def test_custom_dept_bad_item_raises():
    with pytest.raises(InvalidArgumentError) as info:
        get_custom_dept(Context().with_value(DataPermKey.CUSTOM_DEPT, "1,x"))
    assert str(info.value) == "failed to get custom departmrnt ids"


def test_with_custom_dept_round_trip():
    ctx = with_custom_dept(Context(), "5,6")
    assert get_custom_dept(ctx) == [5, 6]
    assert ctx.outgoing(DataPermKey.CUSTOM_DEPT.value) == ["5,6"]


# Sub department


def test_sub_dept_from_metadata():
    assert get_sub_dept(_incoming(DataPermKey.SUB_DEPT, "1,3,20,8")) == [1, 3, 20, 8]


def test_sub_dept_empty_metadata_raises():
    with pytest.raises(InvalidArgumentError):
        get_sub_dept(Context().with_incoming_metadata({}))


def test_sub_dept_from_value():
    ctx = Context().with_value(DataPermKey.SUB_DEPT, "1,3,20,8")
    assert get_sub_dept(ctx) == [1, 3, 20, 8]


def test_with_sub_dept_round_trip():
    assert get_sub_dept(with_sub_dept(Context(), "9")) == [9]


# Filter field


def test_filter_field_from_metadata():
    assert get_filter_field(_incoming(DataPermKey.FILTER_FIELD, "userId")) == "userId"


def test_filter_field_empty_metadata_raises():
    with pytest.raises(InvalidArgumentError) as info:
        get_filter_field(Context().with_incoming_metadata({}))
    assert str(info.value) == "failed to get filter field"


def test_filter_field_from_value():
    assert get_filter_field(Context().with_value(DataPermKey.FILTER_FIELD, "userId")) == "userId"


def test_filter_field_without_metadata_raises():
    with pytest.raises(InvalidArgumentError):
        get_filter_field(Context())


def test_with_filter_field_round_trip():
    ctx = with_filter_field(Context(), "deptId")
    assert get_filter_field(ctx) == "deptId"
    assert ctx.outgoing(DataPermKey.FILTER_FIELD.value) == ["deptId"]


# Redis keys


def test_redis_keys():
    assert role_custom_dept_key(["a", "b"]) == "DATAPERM:ROLE:a,b:CustomDept"
    assert role_scope_key(["a", "b"]) == "DATAPERM:ROLE:a,b:Scope"
    assert sub_dept_key(3) == "DATAPERM:DEPT:3:SubDept"
    assert tenant_role_custom_dept_key(["a"], 2) == "DATAPERM:2:ROLE:a:CustomDept"
    assert tenant_role_scope_key(["a", "b"], 2) == "DATAPERM:2:ROLE:a,b:Scope"
    assert tenant_sub_dept_key(3, 2) == "DATAPERM:2:DEPT:3:SubDept"