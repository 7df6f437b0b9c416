"""
Tests for the plugin operation registry.
"""

import pytest

from hello_plugin.errors import DuplicateOperationError, OperationNotFoundError
from hello_plugin.plugin import FUNCTION, MUTATION, QUERY, REST, create_plugin
from hello_plugin.plugin.registry import PluginRegistry, RESTEndpoint


def echo_resolver(context, args):
    return {"context": dict(context), "args": dict(args)}


class TestPluginRegistry:
    """Tests for PluginRegistry."""

    def setup_method(self):
        """Set up fresh registry for each test."""
        self.registry = PluginRegistry("test-plugin", "0.0.1")

    def test_register_and_resolve_query(self):
        self.registry.register_query("echo", echo_resolver)

        result = self.registry.resolve(QUERY, "echo", {"user_id": "u"}, {"name": "x"})

        assert result == {"context": {"user_id": "u"}, "args": {"name": "x"}}
        assert self.registry.get_query("echo") is echo_resolver

    def test_register_duplicate_raises(self):
        self.registry.register_query("echo", echo_resolver)

        with pytest.raises(DuplicateOperationError, match="already registered"):
            self.registry.register_query("echo", echo_resolver)

    def test_duplicate_error_is_value_error(self):
        self.registry.register_function("echo", echo_resolver)
        with pytest.raises(ValueError):
            self.registry.register_function("echo", echo_resolver)

    def test_same_name_allowed_across_kinds(self):
        self.registry.register_query("echo", echo_resolver)
        self.registry.register_mutation("echo", echo_resolver)

        assert len(self.registry) == 2
        assert "echo" in self.registry

    def test_unknown_operation(self):
        with pytest.raises(OperationNotFoundError) as exc_info:
            self.registry.resolve(MUTATION, "missing", {}, {})

        assert exc_info.value.kind == MUTATION
        assert exc_info.value.name == "missing"
        assert "missing" not in self.registry

    def test_rest_endpoints(self):
        endpoint = RESTEndpoint(method="post", path="/things", description="Things")
        self.registry.register_rest_api(endpoint, echo_resolver)

        assert self.registry.get_rest_handler("POST", "/things") is echo_resolver
        assert self.registry.rest_endpoints() == [endpoint]
        assert self.registry.list_names(REST) == ["POST /things"]

    def test_describe(self):
        self.registry.register_query("q", echo_resolver)
        self.registry.register_function("f", echo_resolver)
        self.registry.register_rest_api(RESTEndpoint("GET", "/r"), echo_resolver)

        description = self.registry.describe()

        assert description["name"] == "test-plugin"
        assert description["version"] == "0.0.1"
        assert description["queries"] == ["q"]
        assert description["mutations"] == []
        assert description["functions"] == ["f"]
        assert description["rest"] == [{"method": "GET", "path": "/r", "description": ""}]


def test_create_plugin_registers_every_operation():
    plugin = create_plugin()

    assert plugin.list_names(QUERY) == [
        "helloWorldQuery",
        "processComplexData",
        "getUserProfile",
        "getUsers",
        "getProduct",
        "getProductsPaginated",
        "searchProducts",
    ]
    assert plugin.list_names(MUTATION) == ["sayHelloMutation", "createUser", "processBulkTags"]
    assert plugin.list_names(FUNCTION) == ["customFunction"]
    assert plugin.list_names(REST) == ["GET /hello", "POST /custom-hello", "GET /status"]


def test_create_plugin_builds_independent_registries():
    assert create_plugin() is not create_plugin()
