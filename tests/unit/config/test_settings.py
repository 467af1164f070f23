"""Unit tests for config settings, loaders and validation errors."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from stripe_webhooks.config.settings import (
    DEFAULT_BASE_URL,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ProviderSettings,
    Settings,
    env_key,
)
from stripe_webhooks.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

_STRIPE_VARS = ("STRIPE_API_KEY", "STRIPE_BASE_URL", "STRIPE_TIMEOUT")


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in _STRIPE_VARS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    ratio: float = 0.5
    tags: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int_and_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        monkeypatch.setenv("APP_RATIO", "0.25")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.port == 9000
        assert settings.ratio == 0.25

    def test_loads_bool(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True
        monkeypatch.setenv("APP_DEBUG", "off")
        assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_defaults_preserved_when_env_absent(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("APP_HOST", "APP_PORT", "APP_DEBUG", "APP_RATIO", "APP_TAGS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings == AppSettings()

    def test_unparseable_number_raises_invalid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"

    def test_provider_api_key_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("STRIPE_API_KEY", "sk_test_env")
        settings = EnvSettingsLoader().load(ProviderSettings)
        assert settings.api_key == "sk_test_env"
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout == 30.0

    def test_provider_timeout_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("STRIPE_API_KEY", "sk_test_env")
        clean_env.setenv("STRIPE_TIMEOUT", "5")
        assert EnvSettingsLoader().load(ProviderSettings).timeout == 5.0

    def test_missing_api_key_raises(self, clean_env: pytest.MonkeyPatch) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(ProviderSettings)
        assert exc_info.value.setting_name == "STRIPE_API_KEY"

    def test_blank_required_value_counts_as_missing(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("STRIPE_API_KEY", "  ")
        with pytest.raises(MissingRequiredSettingError):
            EnvSettingsLoader().load(ProviderSettings)
        assert "api_key" not in EnvSettingsLoader().values(ProviderSettings)

    def test_malformed_value_reported_before_missing_field(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("STRIPE_TIMEOUT", "soon")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader().load(ProviderSettings)
        assert exc_info.value.setting_name == "STRIPE_TIMEOUT"

    def test_values_are_partial(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("STRIPE_BASE_URL", "http://localhost:12111")
        assert EnvSettingsLoader().values(ProviderSettings) == {"base_url": "http://localhost:12111"}

    def test_env_key_uses_prefix(self) -> None:
        assert env_key(ProviderSettings, "api_key") == "STRIPE_API_KEY"
        assert env_key(Settings, "name") == "NAME"


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("STRIPE_API_KEY=sk_test_file\nSTRIPE_BASE_URL=http://localhost:12111\n")
        settings = DotenvSettingsLoader(str(env_file)).load(ProviderSettings)
        assert settings.api_key == "sk_test_file"
        assert settings.base_url == "http://localhost:12111"

    def test_environment_wins_without_override(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("STRIPE_API_KEY=sk_test_file\n")
        clean_env.setenv("STRIPE_API_KEY", "sk_test_env")
        assert DotenvSettingsLoader(str(env_file)).load(ProviderSettings).api_key == "sk_test_env"

    def test_missing_file_falls_back_to_env(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        clean_env.setenv("STRIPE_API_KEY", "sk_test_env")
        loader = DotenvSettingsLoader(str(tmp_path / "absent.env"))
        assert loader.load(ProviderSettings).api_key == "sk_test_env"


# ---------------------------------------------------------------------------
# ProviderSettings validation
# ---------------------------------------------------------------------------


class TestProviderSettings:
    def test_api_key_hidden_from_repr(self) -> None:
        settings = ProviderSettings(api_key="sk_live_secret")
        assert "sk_live_secret" not in repr(settings)

    def test_blank_api_key_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ProviderSettings(api_key="   ")
        assert exc_info.value.setting_name == "api_key"

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            ProviderSettings(api_key="sk_test", timeout=0)


# ---------------------------------------------------------------------------
# Config errors
# ---------------------------------------------------------------------------


class TestConfigErrors:
    def test_missing_required_setting_stores_name(self) -> None:
        err = MissingRequiredSettingError("STRIPE_API_KEY")
        assert err.setting_name == "STRIPE_API_KEY"
        assert "STRIPE_API_KEY" in str(err)
        assert err.code == "missing_required_setting"

    def test_is_config_error(self) -> None:
        assert isinstance(MissingRequiredSettingError("X"), ConfigError)
        assert isinstance(InvalidSettingValueError("X", 1, "bad"), ConfigError)

    def test_invalid_value_does_not_echo_value(self) -> None:
        err = InvalidSettingValueError("api_key", "sk_live_secret", "must not be blank")
        assert "sk_live_secret" not in str(err)
        assert err.value == "sk_live_secret"
