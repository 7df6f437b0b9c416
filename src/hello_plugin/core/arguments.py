"""
Typed access to untyped resolver arguments.

Resolvers receive their arguments as a plain mapping decoded by the host.
Every accessor here is total: a missing key, an explicit ``None`` or a value
of the wrong type yields the caller's default (or the zero value of the
requested type) instead of raising.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

Record = Mapping[str, Any]

_MISSING: Any = object()


def _lookup(args: Any, name: str) -> Any:
    if not isinstance(args, Mapping):
        return None
    return args.get(name)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def get_string_arg(args: Record | None, name: str, default: str = "") -> str:
    """Return ``args[name]`` if it is a string, otherwise ``default``."""
    value = _lookup(args, name)
    if isinstance(value, str):
        return value
    return default


def get_int_arg(args: Record | None, name: str, default: int = 0) -> int:
    """Return ``args[name]`` as an integer.

    JSON decoders hand numbers over as floats, so floats are truncated toward
    zero. Booleans and non-finite floats are rejected.
    """
    value = _lookup(args, name)
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return default
        return int(value)
    return default


def get_float_arg(args: Record | None, name: str, default: float = 0.0) -> float:
    """Return ``args[name]`` as a float; integers are widened."""
    value = _lookup(args, name)
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)
    return default


def get_bool_arg(args: Record | None, name: str, default: bool = False) -> bool:
    """Return ``args[name]`` if it is a boolean, otherwise ``default``."""
    value = _lookup(args, name)
    if isinstance(value, bool):
        return value
    return default


def get_object_arg(args: Record | None, name: str, default: Record | None = None) -> dict[str, Any]:
    """Return a shallow copy of the nested object ``args[name]``.

    An empty dict is returned when the value is absent or not a mapping and
    no default was given.
    """
    value = _lookup(args, name)
    if isinstance(value, Mapping):
        return dict(value)
    return dict(default) if default is not None else {}


def get_array_arg(
    args: Record | None, name: str, default: Sequence[Any] | None = None
) -> list[Any]:
    """Return ``args[name]`` as a list, elements untouched (``None`` included)."""
    value = _lookup(args, name)
    if _is_sequence(value):
        return list(value)
    return list(default) if default is not None else []


def get_array_object_arg(args: Record | None, name: str) -> list[dict[str, Any]]:
    """Return the objects of the array ``args[name]``, skipping non-objects."""
    return [dict(item) for item in get_array_arg(args, name) if isinstance(item, Mapping)]


def get_string_list_arg(args: Record | None, name: str) -> list[str]:
    """Return the string elements of ``args[name]``."""
    return [item for item in get_array_arg(args, name) if isinstance(item, str)]


def get_int_list_arg(args: Record | None, name: str) -> list[int]:
    """Return the integer elements of ``args[name]``, truncating floats."""
    result = []
    for item in get_array_arg(args, name):
        number = get_int_arg({"value": item}, "value", _MISSING)
        if number is not _MISSING:
            result.append(number)
    return result


# Host context helpers


def get_plugin_id(context: Record | None) -> str:
    return get_string_arg(context, "plugin_id")


def get_project_id(context: Record | None) -> str:
    return get_string_arg(context, "project_id")


def get_user_id(context: Record | None) -> str:
    return get_string_arg(context, "user_id")


def get_tenant_id(context: Record | None) -> str:
    return get_string_arg(context, "tenant_id")


def get_all_context_data(context: Record | None) -> dict[str, Any]:
    """Return the host-supplied identifiers that are present in ``context``."""
    keys = ("plugin_id", "project_id", "user_id", "tenant_id", "request_id")
    return {key: context[key] for key in keys if isinstance(context, Mapping) and context.get(key)}
