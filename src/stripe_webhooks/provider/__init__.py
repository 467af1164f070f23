"""Provider – the Stripe webhook endpoint resource and its host contract."""
from stripe_webhooks.provider.diagnostics import (
    Diagnostic,
    Diagnostics,
    Severity,
    from_error,
    has_errors,
    set_all,
)
from stripe_webhooks.provider.metadata import TOMBSTONE, MetadataAdder, reconcile_metadata, update_metadata
from stripe_webhooks.provider.provider import PROVIDER_SCHEMA, Provider
from stripe_webhooks.provider.resource import Resource
from stripe_webhooks.provider.resource_data import ResourceData
from stripe_webhooks.provider.schema import Attribute, Schema, ValueType
from stripe_webhooks.provider.webhook_endpoint import (
    WEBHOOK_ENDPOINT_SCHEMA,
    WebhookEndpointResource,
)

__all__ = [
    "PROVIDER_SCHEMA",
    "TOMBSTONE",
    "WEBHOOK_ENDPOINT_SCHEMA",
    "Attribute",
    "Diagnostic",
    "Diagnostics",
    "MetadataAdder",
    "Provider",
    "Resource",
    "ResourceData",
    "Schema",
    "Severity",
    "ValueType",
    "WebhookEndpointResource",
    "from_error",
    "has_errors",
    "reconcile_metadata",
    "set_all",
    "update_metadata",
]
