"""Stripe adapter – WebhookEndpoint remote representation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

STATUS_ENABLED = "enabled"
STATUS_DISABLED = "disabled"


@dataclass
class WebhookEndpoint:
    """A webhook endpoint as returned by the Stripe API.

    ``secret`` is only populated in the response to the create call.
    ``application`` is empty unless the endpoint listens to Connect accounts.
    """

    id: str
    url: str = ""
    enabled_events: list[str] = field(default_factory=list)
    description: str = ""
    status: str = ""
    application: str = ""
    api_version: str = ""
    metadata: dict[str, str] = field(default_factory=dict)
    secret: str = ""
    livemode: bool = False
    created: int = 0
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WebhookEndpoint":
        """Build from decoded JSON; ``null`` fields become empty values."""
        return cls(
            id=data.get("id") or "",
            url=data.get("url") or "",
            enabled_events=list(data.get("enabled_events") or []),
            description=data.get("description") or "",
            status=data.get("status") or "",
            application=data.get("application") or "",
            api_version=data.get("api_version") or "",
            metadata=dict(data.get("metadata") or {}),
            secret=data.get("secret") or "",
            livemode=bool(data.get("livemode", False)),
            created=int(data.get("created") or 0),
            deleted=bool(data.get("deleted", False)),
        )

    @property
    def is_enabled(self) -> bool:
        return self.status == STATUS_ENABLED


__all__ = ["STATUS_DISABLED", "STATUS_ENABLED", "WebhookEndpoint"]
