"""Provider – declarative attribute schema."""
from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from stripe_webhooks.kernel.errors import ProjectionError
from stripe_webhooks.kernel.types import to_bool, to_list, to_map, to_string


class ValueType(enum.Enum):
    STRING = "string"
    BOOL = "bool"
    LIST = "list"
    MAP = "map"


_SCALARS: dict[ValueType, type] = {ValueType.STRING: str, ValueType.BOOL: bool}


@dataclass(frozen=True)
class Attribute:
    """One field of a resource or provider schema.

    ``elem`` is the element type of a ``LIST`` or the value type of a ``MAP``.
    A ``force_new`` attribute is fixed at creation: changing it means
    destroying and re-creating the remote object.
    """

    type: ValueType
    elem: ValueType | None = None
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    force_new: bool = False
    default: Any = None
    description: str = ""

    @property
    def computed_only(self) -> bool:
        return self.computed and not (self.required or self.optional)

    def zero_value(self) -> Any:
        if self.type is ValueType.STRING:
            return ""
        if self.type is ValueType.BOOL:
            return False
        if self.type is ValueType.LIST:
            return []
        return {}

    def default_value(self) -> Any:
        return self.zero_value() if self.default is None else self.default

    def normalize(self, value: Any) -> Any:
        """Coerce a loosely-typed value for comparison, never raising."""
        if self.type is ValueType.STRING:
            return to_string(value)
        if self.type is ValueType.BOOL:
            return to_bool(value)
        if self.type is ValueType.LIST:
            items = to_list(value)
            return [to_string(i) for i in items] if self.elem is ValueType.STRING else items
        mapping = to_map(value)
        if self.elem is ValueType.STRING:
            return {k: to_string(v) for k, v in mapping.items()}
        return mapping

    def validate(self, key: str, value: Any) -> Any:
        """Return *value* ready for storage or raise :class:`ProjectionError`."""
        if value is None:
            return self.zero_value()
        if self.type in _SCALARS:
            self._check_scalar(key, value, self.type)
            return value
        if self.type is ValueType.LIST:
            if not isinstance(value, (list, tuple)):
                raise ProjectionError(key, value, f"expected a list, got {type(value).__name__}")
            if self.elem is not None:
                for item in value:
                    self._check_scalar(key, item, self.elem)
            return list(value)
        if not isinstance(value, Mapping):
            raise ProjectionError(key, value, f"expected a map, got {type(value).__name__}")
        for map_key, item in value.items():
            if not isinstance(map_key, str):
                raise ProjectionError(key, value, f"map key {map_key!r} is not a string")
            if self.elem is not None:
                self._check_scalar(key, item, self.elem)
        return dict(value)

    @staticmethod
    def _check_scalar(key: str, value: Any, expected: ValueType) -> None:
        python_type = _SCALARS.get(expected)
        if python_type is not None and not isinstance(value, python_type):
            raise ProjectionError(
                key, value, f"expected {expected.value}, got {type(value).__name__}"
            )


type Schema = Mapping[str, Attribute]

__all__ = ["Attribute", "Schema", "ValueType"]
