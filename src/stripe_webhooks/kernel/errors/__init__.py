"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── RemoteCallError          (remote.py)
    │   ├── RateLimitError       HTTP 429, the only retried failure
    │   ├── NotFoundError        HTTP 404
    │   └── RemoteTimeoutError
    ├── ProjectionError          (local.py)
    ├── ImmutableFieldError      (local.py)
    └── ConfigError              (stripe_webhooks.config.validation)
"""

from stripe_webhooks.kernel.errors.base import BaseError
from stripe_webhooks.kernel.errors.local import ImmutableFieldError, ProjectionError
from stripe_webhooks.kernel.errors.remote import (
    RATE_LIMIT_STATUS,
    NotFoundError,
    RateLimitError,
    RemoteCallError,
    RemoteTimeoutError,
    is_rate_limited,
)

__all__ = [
    "RATE_LIMIT_STATUS",
    "BaseError",
    "ImmutableFieldError",
    "NotFoundError",
    "ProjectionError",
    "RateLimitError",
    "RemoteCallError",
    "RemoteTimeoutError",
    "is_rate_limited",
]
