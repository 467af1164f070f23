"""Permissive coercion of loosely-typed attribute values.

Attribute values arrive as plain scalars, boxed options (``Some``/``Nothing``),
lists of mixed values, mappings, or a one-element list wrapping a mapping.
Every function here is total: an unrecognised shape degrades to the empty or
falsy value of the target type instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from stripe_webhooks.kernel.types.option import Nothing, Some

type Value = str | bool | list[Any] | tuple[Any, ...] | Mapping[str, Any] | Some[Any] | Nothing[Any] | None


class AttributeGetter(Protocol):
    """Anything that exposes attribute values by key."""

    def get(self, key: str) -> Any: ...


def _unbox(value: Any) -> Any:
    return value.value if isinstance(value, Some) else value


def to_string(value: Any) -> str:
    """Return *value* as ``str``; ``""`` for anything that is not a string."""
    value = _unbox(value)
    return value if isinstance(value, str) else ""


def to_bool(value: Any) -> bool:
    """Return *value* as ``bool``; ``False`` for anything that is not a bool."""
    value = _unbox(value)
    return value if isinstance(value, bool) else False


def to_list(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def to_string_list(value: Any) -> list[str]:
    """Coerce each element of :func:`to_list` through :func:`to_string`."""
    return [to_string(item) for item in to_list(value)]


def to_map(value: Any) -> dict[str, Any]:
    """Return *value* as a ``dict``.

    A list or tuple whose first element is a mapping is unwrapped to that
    mapping. Everything else, the empty list included, yields ``{}``.
    """
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, (list, tuple)) and value and isinstance(value[0], Mapping):
        return dict(value[0])
    return {}


def extract_string(d: AttributeGetter, key: str) -> str:
    return to_string(d.get(key))


def extract_bool(d: AttributeGetter, key: str) -> bool:
    return to_bool(d.get(key))


def extract_string_list(d: AttributeGetter, key: str) -> list[str]:
    return to_string_list(d.get(key))


__all__ = [
    "AttributeGetter",
    "Value",
    "extract_bool",
    "extract_string",
    "extract_string_list",
    "to_bool",
    "to_list",
    "to_map",
    "to_string",
    "to_string_list",
]
