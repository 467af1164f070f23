"""Stripe adapter – WebhookEndpointParams request body."""
from __future__ import annotations

from dataclasses import dataclass


def _form_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass
class WebhookEndpointParams:
    """Fields of a create or update request; ``None`` means "not sent"."""

    url: str | None = None
    enabled_events: list[str] | None = None
    description: str | None = None
    connect: bool | None = None
    api_version: str | None = None
    disabled: bool | None = None
    metadata: dict[str, str] | None = None

    def add_metadata(self, key: str, value: str) -> None:
        """Queue *key* for writing; an empty *value* deletes the key remotely."""
        if self.metadata is None:
            self.metadata = {}
        self.metadata[key] = value

    def sent_fields(self) -> list[str]:
        """Names of the fields that will appear in the request body."""
        return [name for name, value in vars(self).items() if value is not None]

    def to_form(self) -> dict[str, str]:
        """Encode as Stripe form fields, e.g. ``{"enabled_events[0]": "*"}``."""
        form: dict[str, str] = {}
        if self.url is not None:
            form["url"] = self.url
        if self.enabled_events is not None:
            form.update((f"enabled_events[{i}]", event) for i, event in enumerate(self.enabled_events))
        if self.description is not None:
            form["description"] = self.description
        if self.connect is not None:
            form["connect"] = _form_bool(self.connect)
        if self.api_version is not None:
            form["api_version"] = self.api_version
        if self.disabled is not None:
            form["disabled"] = _form_bool(self.disabled)
        if self.metadata:
            form.update((f"metadata[{key}]", value) for key, value in self.metadata.items())
        return form


__all__ = ["WebhookEndpointParams"]
