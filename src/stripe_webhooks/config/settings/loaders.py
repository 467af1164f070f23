"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from stripe_webhooks.config.settings.base import Settings
from stripe_webhooks.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


def env_key(settings_class: type[Settings], field_name: str) -> str:
    """Environment variable name for *field_name*, e.g. ``STRIPE_API_KEY``."""
    prefix = getattr(settings_class, "_prefix", "").upper()
    return f"{prefix}_{field_name}".upper().lstrip("_")


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return (
        field.default is dataclasses.MISSING
        and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
    )


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...

    def values(self, settings_class: type[T]) -> dict[str, Any]:
        """Field values this source provides; a partial mapping is allowed.

        The default builds a complete instance with :meth:`load`.
        """
        instance = self.load(settings_class)
        return {f.name: getattr(instance, f.name) for f in dataclasses.fields(instance)}  # type: ignore[arg-type]


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Every variable that is present is coerced before any required field is
    reported missing, so a malformed value is never hidden behind a missing
    one. A blank value for a required field counts as missing.
    """

    def values(self, settings_class: type[T]) -> dict[str, Any]:
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            key = env_key(settings_class, field.name)
            raw = os.environ.get(key)
            if raw is None or (_is_required(field) and not raw.strip()):
                continue
            kwargs[field.name] = self._coerce(key, raw, field.type)
        return kwargs

    def load(self, settings_class: type[T]) -> T:
        kwargs = self.values(settings_class)

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            if field.name not in kwargs and _is_required(field):
                raise MissingRequiredSettingError(env_key(settings_class, field.name))

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load settings: {exc}", cause=exc) from exc

    def _coerce(self, key: str, value: str, type_hint: Any) -> Any:
        try:
            if type_hint is bool or type_hint == "bool":
                return value.lower() in ("1", "true", "yes", "on")
            if type_hint is int or type_hint == "int":
                return int(value)
            if type_hint is float or type_hint == "float":
                return float(value)
        except ValueError as exc:
            raise InvalidSettingValueError(key, value, str(exc)) from exc
        return value


class DotenvSettingsLoader(SettingsLoader):
    """Load settings from a ``.env`` file then fall back to ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def values(self, settings_class: type[T]) -> dict[str, Any]:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().values(settings_class)

    def load(self, settings_class: type[T]) -> T:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "env_key"]
