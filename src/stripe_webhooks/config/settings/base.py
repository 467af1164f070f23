"""Config settings – Settings base class and the provider settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from stripe_webhooks.config.validation.errors import InvalidSettingValueError

DEFAULT_BASE_URL = "https://api.stripe.com"


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ProviderSettings(Settings):
    """Credentials and transport options, read from ``STRIPE_*`` variables."""

    _prefix: ClassVar[str] = "STRIPE"

    api_key: str = dataclasses.field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0

    def _validate(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise InvalidSettingValueError("api_key", "", "must not be blank")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")


__all__ = ["DEFAULT_BASE_URL", "ProviderSettings", "Settings"]
