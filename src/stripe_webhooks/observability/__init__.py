"""Observability – structured logging."""
from stripe_webhooks.observability.logging import (
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
