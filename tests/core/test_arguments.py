"""
Tests for typed argument accessors.
"""

import math

import pytest

from hello_plugin.core.arguments import (
    get_all_context_data,
    get_array_arg,
    get_array_object_arg,
    get_bool_arg,
    get_float_arg,
    get_int_arg,
    get_int_list_arg,
    get_object_arg,
    get_plugin_id,
    get_string_arg,
    get_string_list_arg,
    get_tenant_id,
)

WRONG_TYPES = [None, "text", 3, 2.5, True, {"a": 1}, [1, 2], object()]


class TestScalarAccessors:
    def test_string_present(self):
        assert get_string_arg({"name": "Ada"}, "name", "World") == "Ada"

    def test_string_absent_uses_default(self):
        assert get_string_arg({}, "name", "World") == "World"
        assert get_string_arg({}, "name") == ""

    def test_string_empty_is_kept(self):
        assert get_string_arg({"name": ""}, "name", "World") == ""

    def test_int_truncates_floats(self):
        assert get_int_arg({"limit": 3.9}, "limit") == 3
        assert get_int_arg({"limit": -2.7}, "limit") == -2

    def test_int_rejects_bool_and_non_finite(self):
        assert get_int_arg({"limit": True}, "limit", 10) == 10
        assert get_int_arg({"limit": math.inf}, "limit", 10) == 10
        assert get_int_arg({"limit": math.nan}, "limit", 10) == 10

    def test_float_widens_ints(self):
        assert get_float_arg({"weight": 2}, "weight") == 2.0
        assert isinstance(get_float_arg({"weight": 2}, "weight"), float)

    def test_bool(self):
        assert get_bool_arg({"active": False}, "active", True) is False
        assert get_bool_arg({"active": 1}, "active", True) is True
        assert get_bool_arg({}, "active") is False

    @pytest.mark.parametrize("value", WRONG_TYPES)
    def test_accessors_never_raise(self, value):
        args = {"field": value}
        get_string_arg(args, "field", "d")
        get_int_arg(args, "field", 1)
        get_float_arg(args, "field", 1.0)
        get_bool_arg(args, "field", True)
        get_object_arg(args, "field")
        get_array_arg(args, "field")
        get_array_object_arg(args, "field")

    @pytest.mark.parametrize("args", [None, "not a mapping", 42, ["a"]])
    def test_non_mapping_args_fall_back(self, args):
        assert get_string_arg(args, "name", "World") == "World"
        assert get_int_arg(args, "limit", 10) == 10
        assert get_object_arg(args, "input") == {}


class TestStructuredAccessors:
    def test_object_is_copied(self):
        inner = {"name": "Ada", "age": 36}
        obj = get_object_arg({"object": inner}, "object")
        obj["name"] = "changed"
        assert inner["name"] == "Ada"

    def test_object_default(self):
        assert get_object_arg({"object": "x"}, "object", {"name": "d"}) == {"name": "d"}

    def test_array_keeps_none_entries(self):
        assert get_array_arg({"users": [None, {"name": "a"}]}, "users") == [None, {"name": "a"}]

    def test_array_rejects_strings(self):
        assert get_array_arg({"tags": "abc"}, "tags") == []

    def test_array_object_skips_non_objects(self):
        args = {"tags": [{"name": "a"}, None, "b", {"name": "c"}]}
        assert get_array_object_arg(args, "tags") == [{"name": "a"}, {"name": "c"}]

    def test_string_list(self):
        assert get_string_list_arg({"tags": ["a", 1, "b", None]}, "tags") == ["a", "b"]

    def test_int_list_truncates_and_filters(self):
        assert get_int_list_arg({"numbers": [1, 2.8, "3", True, None]}, "numbers") == [1, 2]


class TestContextAccessors:
    def test_context_ids(self, plugin_context):
        assert get_plugin_id(plugin_context) == "hc-hello-world-plugin"
        assert get_tenant_id(plugin_context) == "tenant-1"
        assert get_tenant_id({}) == ""

    def test_all_context_data_skips_missing(self):
        data = get_all_context_data({"plugin_id": "p", "user_id": "", "cache": object()})
        assert data == {"plugin_id": "p"}
