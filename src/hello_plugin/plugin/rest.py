"""
REST handlers of the Hello World plugin
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from ..config import settings
from ..core.arguments import get_string_arg
from ..core.dataset import format_timestamp

FEATURES = [
    "GraphQL Queries",
    "GraphQL Mutations",
    "REST APIs",
    "Custom Functions",
]


def hello(context: Mapping[str, Any], args: Mapping[str, Any]) -> dict[str, Any]:
    _ = context, args
    return {
        "message": "Hello World from REST API!",
        "timestamp": format_timestamp(datetime.now(UTC)),
        "plugin": settings.plugin_name,
        "version": settings.plugin_version,
    }


def custom_hello(context: Mapping[str, Any], args: Mapping[str, Any]) -> dict[str, Any]:
    """Greet ``name`` with ``message``; empty values fall back to the defaults."""
    _ = context
    name = get_string_arg(args, "name") or "World"
    message = get_string_arg(args, "message") or "Hello"
    return {
        "greeting": f"{message}, {name}!",
        "plugin": settings.plugin_name,
        "version": settings.plugin_version,
    }


def status(context: Mapping[str, Any], args: Mapping[str, Any]) -> dict[str, Any]:
    _ = context, args
    return {
        "status": "running",
        "version": settings.plugin_version,
        "features": list(FEATURES),
    }
