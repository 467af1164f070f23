"""Remote errors – failures reported by, or on the way to, the Stripe API."""

from __future__ import annotations

from typing import Any

from stripe_webhooks.kernel.errors.base import BaseError

RATE_LIMIT_STATUS = 429


class RemoteCallError(BaseError):
    """A remote call failed (network, auth, validation, server error, …)."""

    default_code = "remote_call_failed"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Remote call to '{service}' failed", **kwargs)
        self.service = service
        self.status_code = status_code


class RateLimitError(RemoteCallError):
    """The remote API rejected the call with HTTP 429."""

    default_code = "rate_limited"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        retry_after_seconds: float | None = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("status_code", RATE_LIMIT_STATUS)
        super().__init__(service, message or "Rate limit exceeded", **kwargs)
        self.retry_after_seconds = retry_after_seconds


class NotFoundError(RemoteCallError):
    """The requested remote object does not exist."""

    default_code = "not_found"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        resource: str = "resource",
        identifier: Any = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("status_code", 404)
        if message is None:
            message = f"{resource} not found"
            if identifier is not None:
                message = f"{resource} '{identifier}' not found"
        super().__init__(service, message, **kwargs)
        self.resource = resource
        self.identifier = identifier


class RemoteTimeoutError(RemoteCallError):
    """The transport gave up waiting for the remote API."""

    default_code = "remote_timeout"


def is_rate_limited(exc: BaseException) -> bool:
    """Return True when *exc* is a remote failure carrying HTTP 429."""
    return isinstance(exc, RemoteCallError) and exc.status_code == RATE_LIMIT_STATUS


__all__ = [
    "RATE_LIMIT_STATUS",
    "NotFoundError",
    "RateLimitError",
    "RemoteCallError",
    "RemoteTimeoutError",
    "is_rate_limited",
]
