"""
Bridge between Strawberry fields and the plugin registry.

Strawberry hands resolvers typed Python values; plugin resolvers expect the
plain argument mapping a host would send. Unset arguments are left out of
the mapping so the resolver defaults apply.
"""

import dataclasses
from typing import Any

import strawberry

from ..plugin import plugin


def to_plain(value: Any) -> Any:
    """Convert Strawberry input objects (and lists of them) into plain data."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_plain(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value


def build_args(**arguments: Any) -> dict[str, Any]:
    """Build a resolver argument mapping, dropping arguments that were not given."""
    return {name: to_plain(value) for name, value in arguments.items() if value is not None}


def resolve(info: strawberry.Info, kind: str, operation: str, /, **arguments: Any) -> Any:
    """Dispatch a GraphQL field to the registered plugin operation.

    The leading parameters are positional-only so any GraphQL argument name,
    including ``name`` or ``kind``, can be forwarded as a keyword.
    """
    context = info.context.get("plugin_context", {})
    return plugin.resolve(kind, operation, context, build_args(**arguments))
