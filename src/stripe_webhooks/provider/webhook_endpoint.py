"""Provider – the ``stripe_webhook_endpoint`` resource."""
from __future__ import annotations

from typing import Any, Protocol

from stripe_webhooks.adapters.stripe import WebhookEndpointParams, WebhookEndpointsAPI
from stripe_webhooks.kernel.errors import ImmutableFieldError, RemoteCallError
from stripe_webhooks.kernel.types import (
    extract_bool,
    extract_string,
    extract_string_list,
    to_bool,
    to_map,
    to_string,
)
from stripe_webhooks.observability.logging import get_logger
from stripe_webhooks.provider.diagnostics import Diagnostics, from_error, set_all
from stripe_webhooks.provider.metadata import update_metadata
from stripe_webhooks.provider.resource import Resource
from stripe_webhooks.provider.resource_data import ResourceData
from stripe_webhooks.provider.schema import Attribute, ValueType
from stripe_webhooks.resilience.retry import BackoffExecutor

logger = get_logger(__name__)


class Executor(Protocol):
    def execute(self, call: Any) -> Any: ...


class StripeAPI(Protocol):
    webhook_endpoints: WebhookEndpointsAPI


WEBHOOK_ENDPOINT_SCHEMA: dict[str, Attribute] = {
    "url": Attribute(
        ValueType.STRING,
        required=True,
        description="The URL of the webhook endpoint.",
    ),
    "enabled_events": Attribute(
        ValueType.LIST,
        elem=ValueType.STRING,
        required=True,
        description="The list of events to enable for this endpoint. Use ['*'] to enable all events.",
    ),
    "connect": Attribute(
        ValueType.BOOL,
        optional=True,
        force_new=True,
        default=False,
        description="Whether the endpoint receives events from connected accounts.",
    ),
    "api_version": Attribute(
        ValueType.STRING,
        optional=True,
        computed=True,
        force_new=True,
        description="The API version to use for events sent to this endpoint.",
    ),
    "description": Attribute(
        ValueType.STRING,
        optional=True,
        description="An optional description of what the webhook is used for.",
    ),
    "disabled": Attribute(
        ValueType.BOOL,
        optional=True,
        default=False,
        description="Whether the endpoint is disabled.",
    ),
    "secret": Attribute(
        ValueType.STRING,
        computed=True,
        sensitive=True,
        description="The endpoint's secret, used to generate webhook signatures. Returned only upon creation.",
    ),
    "application": Attribute(
        ValueType.STRING,
        computed=True,
        description="The ID of the associated Connect application.",
    ),
    "metadata": Attribute(
        ValueType.MAP,
        elem=ValueType.STRING,
        optional=True,
        description="Set of key-value pairs attached to the endpoint.",
    ),
}


class WebhookEndpointResource(Resource):
    """Reconcile one Stripe webhook endpoint against its declared state."""

    name = "stripe_webhook_endpoint"
    schema = WEBHOOK_ENDPOINT_SCHEMA

    def __init__(self, executor: Executor | None = None) -> None:
        self.executor = executor or BackoffExecutor()

    def create(self, d: ResourceData, client: StripeAPI) -> Diagnostics:
        """Create the endpoint, then refresh every attribute from Stripe.

        If the follow-up call that disables the endpoint fails, the endpoint
        already exists: the id and secret stay recorded and the error is
        returned. The next read reports the endpoint as enabled, which the
        following update corrects.
        """
        params = WebhookEndpointParams(
            url=extract_string(d, "url"),
            enabled_events=extract_string_list(d, "enabled_events"),
        )
        description, is_set = d.get_ok("description")
        if is_set:
            params.description = to_string(description)
        connect, is_set = d.get_ok("connect")
        if is_set:
            params.connect = to_bool(connect)
        api_version, is_set = d.get_ok("api_version")
        if is_set:
            params.api_version = to_string(api_version)
        metadata, is_set = d.get_ok("metadata")
        if is_set:
            for key, value in to_map(metadata).items():
                params.add_metadata(key, to_string(value))

        try:
            endpoint = self.executor.execute(lambda: client.webhook_endpoints.new(params))
        except RemoteCallError as exc:
            logger.warning("webhook_endpoint.create_failed", error=exc.to_dict())
            return from_error(exc)

        diagnostics = set_all(d, {"secret": endpoint.secret})
        if diagnostics:
            return diagnostics

        d.set_id(endpoint.id)
        logger.info("webhook_endpoint.created", endpoint_id=endpoint.id, fields=params.sent_fields())

        # Stripe creates endpoints enabled; a declared disabled flag needs a second call.
        if extract_bool(d, "disabled"):
            disable = WebhookEndpointParams(disabled=True)
            try:
                self.executor.execute(lambda: client.webhook_endpoints.update(d.id, disable))
            except RemoteCallError as exc:
                logger.warning(
                    "webhook_endpoint.disable_after_create_failed", endpoint_id=d.id, error=exc.to_dict()
                )
                return from_error(exc)

        return self.read(d, client)

    def read(self, d: ResourceData, client: StripeAPI) -> Diagnostics:
        try:
            endpoint = self.executor.execute(lambda: client.webhook_endpoints.get(d.id))
        except RemoteCallError as exc:
            logger.warning("webhook_endpoint.read_failed", endpoint_id=d.id, error=exc.to_dict())
            return from_error(exc)

        return set_all(
            d,
            {
                "enabled_events": endpoint.enabled_events,
                "url": endpoint.url,
                "description": endpoint.description,
                "disabled": not endpoint.is_enabled,
                "connect": endpoint.application != "",
                "api_version": endpoint.api_version,
                "application": endpoint.application,
                "metadata": endpoint.metadata,
            },
        )

    def update(self, d: ResourceData, client: StripeAPI) -> Diagnostics:
        immutable = d.replacement_fields()
        if immutable:
            diagnostics: Diagnostics = []
            for field in immutable:
                diagnostics.extend(from_error(ImmutableFieldError(field)))
            return diagnostics

        params = WebhookEndpointParams()
        if d.has_change("enabled_events"):
            params.enabled_events = extract_string_list(d, "enabled_events")
        if d.has_change("url"):
            params.url = extract_string(d, "url")
        if d.has_change("description"):
            params.description = extract_string(d, "description")
        if d.has_change("disabled"):
            params.disabled = extract_bool(d, "disabled")
        if d.has_change("metadata"):
            update_metadata(d, params)

        try:
            self.executor.execute(lambda: client.webhook_endpoints.update(d.id, params))
        except RemoteCallError as exc:
            logger.warning("webhook_endpoint.update_failed", endpoint_id=d.id, error=exc.to_dict())
            return from_error(exc)

        logger.info("webhook_endpoint.updated", endpoint_id=d.id, fields=params.sent_fields())
        return self.read(d, client)

    def delete(self, d: ResourceData, client: StripeAPI) -> Diagnostics:
        try:
            self.executor.execute(lambda: client.webhook_endpoints.delete(d.id))
        except RemoteCallError as exc:
            logger.warning("webhook_endpoint.delete_failed", endpoint_id=d.id, error=exc.to_dict())
            return from_error(exc)

        logger.info("webhook_endpoint.deleted", endpoint_id=d.id)
        d.set_id("")
        return []


__all__ = ["WEBHOOK_ENDPOINT_SCHEMA", "WebhookEndpointResource"]
