"""Stripe adapter – webhook endpoint API."""
from stripe_webhooks.adapters.stripe.client import StripeClient, WebhookEndpointService, WebhookEndpointsAPI
from stripe_webhooks.adapters.stripe.models import WebhookEndpoint
from stripe_webhooks.adapters.stripe.params import WebhookEndpointParams

__all__ = [
    "StripeClient",
    "WebhookEndpoint",
    "WebhookEndpointParams",
    "WebhookEndpointService",
    "WebhookEndpointsAPI",
]
