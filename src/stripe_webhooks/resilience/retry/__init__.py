"""Resilience – exponential backoff on rate-limited calls."""
from stripe_webhooks.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff
from stripe_webhooks.resilience.retry.policy import BackoffExecutor
from stripe_webhooks.resilience.retry.tenacity_adapter import TenacityBackoffExecutor

__all__ = [
    "BackoffExecutor",
    "BackoffStrategy",
    "ExponentialBackoff",
    "TenacityBackoffExecutor",
]
