"""
Assemble the plugin registry with every operation the plugin serves.
"""

from ..config import settings
from ..logging import get_logger
from . import resolvers, rest
from .registry import PluginRegistry, RESTEndpoint

logger = get_logger(__name__)


def create_plugin() -> PluginRegistry:
    """Build a registry populated with the plugin's queries, mutations, functions and routes."""
    plugin = PluginRegistry(settings.plugin_name, settings.plugin_version)

    logger.info("Registering GraphQL queries", plugin=plugin.name)
    plugin.register_query("helloWorldQuery", resolvers.hello_world)
    plugin.register_query("processComplexData", resolvers.process_complex_data)
    plugin.register_query("getUserProfile", resolvers.get_user_profile)
    plugin.register_query("getUsers", resolvers.get_users)
    plugin.register_query("getProduct", resolvers.get_product)
    plugin.register_query("getProductsPaginated", resolvers.get_products_paginated)
    plugin.register_query("searchProducts", resolvers.search_products)

    logger.info("Registering GraphQL mutations", plugin=plugin.name)
    plugin.register_mutation("sayHelloMutation", resolvers.say_hello)
    plugin.register_mutation("createUser", resolvers.create_user)
    plugin.register_mutation("processBulkTags", resolvers.process_bulk_tags)

    plugin.register_function("customFunction", resolvers.custom_function)

    plugin.register_rest_api(
        RESTEndpoint(method="GET", path="/hello", description="Simple hello endpoint"),
        rest.hello,
    )
    plugin.register_rest_api(
        RESTEndpoint(
            method="POST",
            path="/custom-hello",
            description="Custom hello endpoint with POST data",
            schema={"name": "string", "message": "string"},
        ),
        rest.custom_hello,
    )
    plugin.register_rest_api(
        RESTEndpoint(method="GET", path="/status", description="Plugin status endpoint"),
        rest.status,
    )

    logger.info("Plugin registration complete", plugin=plugin.name, operations=len(plugin))
    return plugin
