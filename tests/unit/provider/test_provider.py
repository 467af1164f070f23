"""Unit tests for Provider configuration and resource lookup."""

from __future__ import annotations

from pathlib import Path

import pytest

from stripe_webhooks.adapters.stripe import StripeClient
from stripe_webhooks.config import DotenvSettingsLoader
from stripe_webhooks.provider import PROVIDER_SCHEMA, Provider, Severity, WebhookEndpointResource
from stripe_webhooks.resilience.retry import BackoffExecutor
from stripe_webhooks.testing.fakes import RecordingSleeper


@pytest.fixture
def no_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for key in ("STRIPE_API_KEY", "STRIPE_BASE_URL", "STRIPE_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestProviderSchema:
    def test_api_key_is_required_and_sensitive(self) -> None:
        attr = PROVIDER_SCHEMA["api_key"]
        assert attr.required is True
        assert attr.sensitive is True


class TestResources:
    def test_webhook_endpoint_registered(self) -> None:
        provider = Provider()
        assert isinstance(provider.resource("stripe_webhook_endpoint"), WebhookEndpointResource)
        assert list(provider.resources) == ["stripe_webhook_endpoint"]

    def test_unknown_resource(self) -> None:
        with pytest.raises(KeyError, match="stripe_customer"):
            Provider().resource("stripe_customer")

    def test_executor_is_shared_with_resources(self) -> None:
        executor = BackoffExecutor(sleep=RecordingSleeper())
        provider = Provider(executor=executor)
        assert provider.resource("stripe_webhook_endpoint").executor is executor


class TestConfigure:
    def test_explicit_api_key(self, no_env: pytest.MonkeyPatch) -> None:
        client, diagnostics = Provider().configure({"api_key": "sk_test_explicit"})
        assert diagnostics == []
        assert isinstance(client, StripeClient)
        client.close()

    def test_falls_back_to_environment(self, no_env: pytest.MonkeyPatch) -> None:
        no_env.setenv("STRIPE_API_KEY", "sk_test_env")
        client, diagnostics = Provider().configure({})
        assert diagnostics == []
        assert client is not None
        client.close()

    def test_blank_api_key_falls_back_to_environment(self, no_env: pytest.MonkeyPatch) -> None:
        no_env.setenv("STRIPE_API_KEY", "sk_test_env")
        client, diagnostics = Provider().configure({"api_key": ""})
        assert diagnostics == []
        client.close()

    def test_no_config_at_all(self, no_env: pytest.MonkeyPatch) -> None:
        no_env.setenv("STRIPE_API_KEY", "sk_test_env")
        client, diagnostics = Provider().configure()
        assert diagnostics == []
        client.close()

    def test_missing_api_key_is_a_diagnostic(self, no_env: pytest.MonkeyPatch) -> None:
        client, [diag] = Provider().configure({})
        assert client is None
        assert diag.severity is Severity.ERROR
        assert "api_key" in diag.summary

    def test_invalid_timeout_is_a_diagnostic(self, no_env: pytest.MonkeyPatch) -> None:
        no_env.setenv("STRIPE_API_KEY", "sk_test_env")
        no_env.setenv("STRIPE_TIMEOUT", "soon")
        client, [diag] = Provider().configure()
        assert client is None
        assert "STRIPE_TIMEOUT" in diag.summary

    def test_explicit_key_wins_over_blank_environment(self, no_env: pytest.MonkeyPatch) -> None:
        no_env.setenv("STRIPE_API_KEY", "")
        client, diagnostics = Provider().configure({"api_key": "sk_test_explicit"})
        assert diagnostics == []
        assert client is not None
        client.close()

    def test_invalid_timeout_reported_with_explicit_key(self, no_env: pytest.MonkeyPatch) -> None:
        no_env.setenv("STRIPE_TIMEOUT", "soon")
        client, [diag] = Provider().configure({"api_key": "sk_test_explicit"})
        assert client is None
        assert "STRIPE_TIMEOUT" in diag.summary

    def test_dotenv_loader(self, no_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("STRIPE_API_KEY=sk_test_dotenv\n")
        client, diagnostics = Provider(loaders=[DotenvSettingsLoader(str(env_file))]).configure()
        assert diagnostics == []
        client.close()
