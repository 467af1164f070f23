"""Provider – ResourceData, the per-operation attribute store."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from stripe_webhooks.kernel.errors import ProjectionError
from stripe_webhooks.provider.schema import Attribute, Schema


class ResourceData:
    """Attribute values for one resource during one operation.

    *state* is the prior recorded state, *config* the caller's declared
    configuration (``None`` when the operation has no configuration, as on a
    plain refresh). Values written with :meth:`set` shadow both and are
    tracked in :attr:`written`.
    """

    def __init__(
        self,
        schema: Schema,
        *,
        config: Mapping[str, Any] | None = None,
        state: Mapping[str, Any] | None = None,
        id: str = "",  # noqa: A002
    ) -> None:
        self._schema = schema
        self._config = dict(config) if config is not None else None
        self._state = dict(state or {})
        self._id = id
        self._written: dict[str, Any] = {}

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        """Adopt *value* as the remote identity; ``""`` marks the resource gone."""
        self._id = value

    @property
    def written(self) -> dict[str, Any]:
        """Attributes written during this operation."""
        return dict(self._written)

    def _attribute(self, key: str) -> Attribute:
        try:
            return self._schema[key]
        except KeyError:
            raise KeyError(f"attribute '{key}' is not declared in the schema") from None

    def _old(self, key: str) -> Any:
        attr = self._attribute(key)
        value = self._state.get(key)
        return attr.default_value() if value is None else value

    def _new(self, key: str) -> Any:
        attr = self._attribute(key)
        if self._config is None or attr.computed_only:
            return self._old(key)
        value = self._config.get(key)
        if value is not None:
            return value
        if attr.computed and self._state.get(key) is not None:
            return self._state[key]
        return attr.default_value()

    def get(self, key: str) -> Any:
        if key in self._written:
            return self._written[key]
        return self._new(key)

    def get_ok(self, key: str) -> tuple[Any, bool]:
        """Return the value and whether the caller explicitly set it."""
        self._attribute(key)
        source = self._config if self._config is not None else self._state
        return self.get(key), source.get(key) is not None

    def get_change(self, key: str) -> tuple[Any, Any]:
        return self._old(key), self._new(key)

    def has_change(self, key: str) -> bool:
        attr = self._attribute(key)
        old, new = self.get_change(key)
        return attr.normalize(old) != attr.normalize(new)

    def set(self, key: str, value: Any) -> None:
        """Write *value*, raising :class:`ProjectionError` when it does not fit."""
        attr = self._schema.get(key)
        if attr is None:
            raise ProjectionError(key, value, "attribute is not declared in the schema")
        self._written[key] = attr.validate(key, value)

    def replacement_fields(self) -> list[str]:
        """``force_new`` attributes the configuration changes on a live resource."""
        if not self._id or self._config is None:
            return []
        return [key for key, attr in self._schema.items() if attr.force_new and self.has_change(key)]

    def state(self) -> dict[str, Any]:
        """Snapshot of every schema attribute, suitable as the next prior state."""
        return {key: self.get(key) for key in self._schema}

    def __repr__(self) -> str:
        return f"ResourceData(id={self._id!r}, written={sorted(self._written)})"


__all__ = ["ResourceData"]
