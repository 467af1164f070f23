"""HTTP adapter – StripeHttpClient."""
from __future__ import annotations

from typing import Any

import httpx

from stripe_webhooks.config.settings.base import DEFAULT_BASE_URL
from stripe_webhooks.kernel.errors import (
    RATE_LIMIT_STATUS,
    NotFoundError,
    RateLimitError,
    RemoteCallError,
    RemoteTimeoutError,
)

SERVICE = "stripe"


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return None


def _retry_after(response: httpx.Response) -> float | None:
    raw = response.headers.get("Retry-After")
    if raw is None:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


def map_status_error(method: str, url: str, response: httpx.Response) -> RemoteCallError:
    """Translate a non-2xx Stripe response into the error hierarchy."""
    status = response.status_code
    message = _error_message(response) or f"HTTP {status} from {method} {url}"
    if status == RATE_LIMIT_STATUS:
        return RateLimitError(SERVICE, message, retry_after_seconds=_retry_after(response))
    if status == 404:
        return NotFoundError(SERVICE, message, identifier=url)
    return RemoteCallError(SERVICE, message, status_code=status)


class StripeHttpClient:
    """Thin synchronous httpx wrapper: API-key auth, form bodies, JSON replies."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        **kwargs: Any,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            auth=(api_key, ""),
            **kwargs,
        )

    def __enter__(self) -> "StripeHttpClient":
        self._client.__enter__()
        return self

    def __exit__(self, *args: Any) -> None:
        self._client.__exit__(*args)

    def close(self) -> None:
        self._client.close()

    def get(self, url: str, **kwargs: Any) -> dict[str, Any]:
        return self._request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> dict[str, Any]:
        return self._request("POST", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> dict[str, Any]:
        return self._request("DELETE", url, **kwargs)

    def _request(self, method: str, url: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise RemoteTimeoutError(SERVICE, f"HTTP request timed out: {method} {url}") from exc
        except httpx.HTTPStatusError as exc:
            raise map_status_error(method, url, exc.response) from exc
        except httpx.HTTPError as exc:
            raise RemoteCallError(SERVICE, str(exc)) from exc
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteCallError(
                SERVICE,
                f"Malformed JSON from {method} {url}",
                status_code=response.status_code,
            ) from exc


__all__ = ["StripeHttpClient", "map_status_error"]
