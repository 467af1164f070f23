"""Config settings – 12-factor env-based configuration."""
from stripe_webhooks.config.settings.base import DEFAULT_BASE_URL, ProviderSettings, Settings
from stripe_webhooks.config.settings.factory import SettingsFactory
from stripe_webhooks.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    env_key,
)

__all__ = [
    "DEFAULT_BASE_URL",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ProviderSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "env_key",
]
