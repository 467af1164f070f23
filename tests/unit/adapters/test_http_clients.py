"""Unit tests – StripeHttpClient error mapping and transport."""
from __future__ import annotations

import base64

import httpx
import pytest
import respx

from stripe_webhooks.adapters.http import StripeHttpClient
from stripe_webhooks.kernel.errors import (
    NotFoundError,
    RateLimitError,
    RemoteCallError,
    RemoteTimeoutError,
    is_rate_limited,
)

BASE = "https://api.stripe.test"


def _client() -> StripeHttpClient:
    return StripeHttpClient("sk_test_123", base_url=BASE)


def _stripe_error(status: int, message: str) -> httpx.Response:
    return httpx.Response(status, json={"error": {"type": "invalid_request_error", "message": message}})


# ---------------------------------------------------------------------------
# Successful calls
# ---------------------------------------------------------------------------


class TestStripeHttpClientSuccess:
    @respx.mock
    def test_get_returns_json(self) -> None:
        respx.get(f"{BASE}/v1/thing").mock(return_value=httpx.Response(200, json={"id": "x"}))
        with _client() as client:
            assert client.get("/v1/thing") == {"id": "x"}

    @respx.mock
    def test_uses_basic_auth_with_api_key(self) -> None:
        route = respx.get(f"{BASE}/v1/thing").mock(return_value=httpx.Response(200, json={}))
        with _client() as client:
            client.get("/v1/thing")
        expected = "Basic " + base64.b64encode(b"sk_test_123:").decode()
        assert route.calls.last.request.headers["authorization"] == expected

    @respx.mock
    def test_post_sends_form_body(self) -> None:
        route = respx.post(f"{BASE}/v1/thing").mock(return_value=httpx.Response(200, json={}))
        with _client() as client:
            client.post("/v1/thing", data={"enabled_events[0]": "*", "url": "https://ex.com"})
        body = route.calls.last.request.content.decode()
        assert "enabled_events%5B0%5D=%2A" in body
        assert "url=https%3A%2F%2Fex.com" in body


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


class TestStripeHttpClientErrors:
    @respx.mock
    def test_429_maps_to_rate_limit(self) -> None:
        respx.get(f"{BASE}/v1/thing").mock(
            return_value=httpx.Response(429, headers={"Retry-After": "3"}, json={"error": {"message": "Too many"}})
        )
        with _client() as client, pytest.raises(RateLimitError) as exc_info:
            client.get("/v1/thing")
        assert exc_info.value.status_code == 429
        assert exc_info.value.retry_after_seconds == 3.0
        assert is_rate_limited(exc_info.value)

    @respx.mock
    def test_404_maps_to_not_found_with_stripe_message(self) -> None:
        respx.get(f"{BASE}/v1/thing").mock(return_value=_stripe_error(404, "No such webhook endpoint: 'we_x'"))
        with _client() as client, pytest.raises(NotFoundError) as exc_info:
            client.get("/v1/thing")
        assert str(exc_info.value) == "No such webhook endpoint: 'we_x'"
        assert not is_rate_limited(exc_info.value)

    @respx.mock
    def test_400_maps_to_remote_call_error(self) -> None:
        respx.post(f"{BASE}/v1/thing").mock(return_value=_stripe_error(400, "Invalid URL"))
        with _client() as client, pytest.raises(RemoteCallError) as exc_info:
            client.post("/v1/thing")
        assert exc_info.value.status_code == 400
        assert str(exc_info.value) == "Invalid URL"

    @respx.mock
    def test_error_without_json_body_uses_status_line(self) -> None:
        respx.get(f"{BASE}/v1/thing").mock(return_value=httpx.Response(503, text="upstream down"))
        with _client() as client, pytest.raises(RemoteCallError) as exc_info:
            client.get("/v1/thing")
        assert exc_info.value.status_code == 503
        assert "HTTP 503" in str(exc_info.value)

    @respx.mock
    def test_timeout_maps_to_remote_timeout(self) -> None:
        respx.get(f"{BASE}/v1/thing").mock(side_effect=httpx.ReadTimeout("slow"))
        with _client() as client, pytest.raises(RemoteTimeoutError):
            client.get("/v1/thing")

    @respx.mock
    def test_connection_error_maps_to_remote_call_error(self) -> None:
        respx.get(f"{BASE}/v1/thing").mock(side_effect=httpx.ConnectError("refused"))
        with _client() as client, pytest.raises(RemoteCallError) as exc_info:
            client.get("/v1/thing")
        assert exc_info.value.status_code is None

    @respx.mock
    def test_malformed_json_success_body(self) -> None:
        respx.get(f"{BASE}/v1/thing").mock(return_value=httpx.Response(200, text="not json"))
        with _client() as client, pytest.raises(RemoteCallError):
            client.get("/v1/thing")
