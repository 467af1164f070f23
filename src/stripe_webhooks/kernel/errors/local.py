"""Local errors – failures writing into, or changing, the declared schema."""

from __future__ import annotations

from typing import Any

from stripe_webhooks.kernel.errors.base import BaseError


class ProjectionError(BaseError):
    """A value could not be written into a schema attribute."""

    default_code = "projection_failed"

    def __init__(self, key: str, value: Any, reason: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid value for attribute '{key}': {reason}", **kwargs)
        self.key = key
        self.value = value
        self.reason = reason


class ImmutableFieldError(BaseError):
    """An attribute fixed at creation was asked to change in place."""

    default_code = "immutable_field"

    def __init__(self, field: str, **kwargs: Any) -> None:
        super().__init__(
            f"Attribute '{field}' cannot be updated in place; "
            "the resource must be destroyed and re-created",
            **kwargs,
        )
        self.field = field


__all__ = ["ImmutableFieldError", "ProjectionError"]
