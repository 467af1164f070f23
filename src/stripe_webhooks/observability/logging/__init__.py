"""Observability – structured logging helpers."""
from stripe_webhooks.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from stripe_webhooks.observability.logging.factory import JsonLoggerFactory
from stripe_webhooks.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
