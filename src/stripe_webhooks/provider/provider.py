"""Provider – configuration and the resource registry."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from stripe_webhooks.adapters.stripe import StripeClient
from stripe_webhooks.config import (
    ConfigError,
    EnvSettingsLoader,
    ProviderSettings,
    SettingsFactory,
    SettingsLoader,
)
from stripe_webhooks.kernel.types import to_string
from stripe_webhooks.observability.logging import get_logger
from stripe_webhooks.provider.diagnostics import Diagnostics, from_error
from stripe_webhooks.provider.resource import Resource
from stripe_webhooks.provider.schema import Attribute, ValueType
from stripe_webhooks.provider.webhook_endpoint import Executor, WebhookEndpointResource

logger = get_logger(__name__)

PROVIDER_SCHEMA: dict[str, Attribute] = {
    "api_key": Attribute(
        ValueType.STRING,
        required=True,
        sensitive=True,
        description="The Stripe secret API key. Defaults to the STRIPE_API_KEY environment variable.",
    ),
}


class Provider:
    """Stripe provider: builds the API client and exposes its resources."""

    schema = PROVIDER_SCHEMA

    def __init__(
        self,
        *,
        executor: Executor | None = None,
        loaders: Sequence[SettingsLoader] | None = None,
    ) -> None:
        endpoint = WebhookEndpointResource(executor=executor)
        self.resources: dict[str, Resource] = {endpoint.name: endpoint}
        self._loaders = list(loaders) if loaders is not None else [EnvSettingsLoader()]

    def resource(self, name: str) -> Resource:
        try:
            return self.resources[name]
        except KeyError:
            raise KeyError(f"unknown resource type '{name}'") from None

    def configure(self, config: Mapping[str, Any] | None = None) -> tuple[StripeClient | None, Diagnostics]:
        """Return a client for *config*; ``api_key`` falls back to ``STRIPE_API_KEY``."""
        overrides: dict[str, Any] = {}
        api_key = to_string((config or {}).get("api_key"))
        if api_key:
            overrides["api_key"] = api_key

        try:
            settings = SettingsFactory.create(ProviderSettings, loaders=self._loaders, overrides=overrides)
        except ConfigError as exc:
            logger.error("provider.configure_failed", error=exc.to_dict())
            return None, from_error(exc)

        logger.debug("provider.configured", base_url=settings.base_url)
        return StripeClient.from_settings(settings), []


__all__ = ["PROVIDER_SCHEMA", "Provider"]
