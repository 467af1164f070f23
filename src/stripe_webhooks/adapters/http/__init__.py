"""HTTP adapter – synchronous httpx client with structured error mapping."""
from stripe_webhooks.adapters.http.client import StripeHttpClient, map_status_error

__all__ = ["StripeHttpClient", "map_status_error"]
