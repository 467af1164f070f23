"""
stripe_webhooks – Stripe webhook endpoint reconciliation.

Import path convention::

    from stripe_webhooks.provider import Provider, WebhookEndpointResource
    from stripe_webhooks.resilience.retry import BackoffExecutor
    from stripe_webhooks.kernel.errors import RemoteCallError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
