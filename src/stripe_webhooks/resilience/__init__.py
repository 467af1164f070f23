"""Resilience – retry of rate-limited remote calls."""

from stripe_webhooks.resilience.retry import (
    BackoffExecutor,
    BackoffStrategy,
    ExponentialBackoff,
    TenacityBackoffExecutor,
)

__all__ = [
    "BackoffExecutor",
    "BackoffStrategy",
    "ExponentialBackoff",
    "TenacityBackoffExecutor",
]
