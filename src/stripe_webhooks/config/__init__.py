"""Config – 12-factor settings and loaders."""

from stripe_webhooks.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ProviderSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
)
from stripe_webhooks.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ProviderSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
]
