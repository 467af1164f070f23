"""Stripe adapter – StripeClient and the webhook endpoint service."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from stripe_webhooks.adapters.http.client import StripeHttpClient
from stripe_webhooks.adapters.stripe.models import WebhookEndpoint
from stripe_webhooks.adapters.stripe.params import WebhookEndpointParams
from stripe_webhooks.config.settings.base import DEFAULT_BASE_URL, ProviderSettings

WEBHOOK_ENDPOINTS_PATH = "/v1/webhook_endpoints"


@runtime_checkable
class WebhookEndpointsAPI(Protocol):
    """Port: the four webhook endpoint calls the resource needs."""

    def get(self, endpoint_id: str) -> WebhookEndpoint: ...
    def new(self, params: WebhookEndpointParams) -> WebhookEndpoint: ...
    def update(self, endpoint_id: str, params: WebhookEndpointParams) -> WebhookEndpoint: ...
    def delete(self, endpoint_id: str) -> WebhookEndpoint: ...


class WebhookEndpointService:
    """``/v1/webhook_endpoints`` over a :class:`StripeHttpClient`."""

    def __init__(self, http: StripeHttpClient) -> None:
        self._http = http

    def get(self, endpoint_id: str) -> WebhookEndpoint:
        return WebhookEndpoint.from_dict(self._http.get(f"{WEBHOOK_ENDPOINTS_PATH}/{endpoint_id}"))

    def new(self, params: WebhookEndpointParams) -> WebhookEndpoint:
        return WebhookEndpoint.from_dict(self._http.post(WEBHOOK_ENDPOINTS_PATH, data=params.to_form()))

    def update(self, endpoint_id: str, params: WebhookEndpointParams) -> WebhookEndpoint:
        return WebhookEndpoint.from_dict(
            self._http.post(f"{WEBHOOK_ENDPOINTS_PATH}/{endpoint_id}", data=params.to_form())
        )

    def delete(self, endpoint_id: str) -> WebhookEndpoint:
        return WebhookEndpoint.from_dict(self._http.delete(f"{WEBHOOK_ENDPOINTS_PATH}/{endpoint_id}"))


class StripeClient:
    """Entry point handed to every resource operation."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        http: StripeHttpClient | None = None,
    ) -> None:
        self._http = http or StripeHttpClient(api_key, base_url=base_url, timeout=timeout)
        self.webhook_endpoints: WebhookEndpointsAPI = WebhookEndpointService(self._http)

    @classmethod
    def from_settings(cls, settings: ProviderSettings) -> "StripeClient":
        return cls(settings.api_key, base_url=settings.base_url, timeout=settings.timeout)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "StripeClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


__all__ = ["WEBHOOK_ENDPOINTS_PATH", "StripeClient", "WebhookEndpointService", "WebhookEndpointsAPI"]
