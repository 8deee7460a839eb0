"""
Unit tests for the token provider and request header builder.
"""

from __future__ import annotations

import base64
from unittest.mock import patch

import httpx
import pytest

from src.signage.auth import RequestHeaderBuilder, TokenProvider
from src.signage.config import CmsConfig
from src.signage.errors import AuthenticationError, ConfigurationError, TransportError

from .conftest import (
    TEST_CLIENT_ID,
    TEST_CLIENT_SECRET,
    TEST_CMS_URL,
    FakeCms,
    form_fields,
    run_async,
)


def make_provider(cms: FakeCms, **overrides: object) -> TokenProvider:
    settings = {
        "cms_url": TEST_CMS_URL,
        "client_id": TEST_CLIENT_ID,
        "client_secret": TEST_CLIENT_SECRET,
    }
    settings.update(overrides)
    return TokenProvider(CmsConfig(**settings), httpx.AsyncClient(transport=cms.transport))


class TestTokenProvider:
    """Tests for TokenProvider.get_token."""

    def test_oauth_token_request(self, fake_cms: FakeCms) -> None:
        """Test the client-credentials exchange."""
        provider = make_provider(fake_cms)

        token = run_async(provider.get_token())

        assert token == "abc123"
        request = fake_cms.token_requests[0]
        assert request.method == "POST"
        assert str(request.url) == f"{TEST_CMS_URL}/api/authorize/access_token"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
        assert form_fields(request) == {
            "grant_type": ["client_credentials"],
            "client_id": [TEST_CLIENT_ID],
            "client_secret": [TEST_CLIENT_SECRET],
        }

    def test_rejected_credentials(self, fake_cms: FakeCms) -> None:
        """Test that a 401 becomes an AuthenticationError naming the status."""
        fake_cms.token_status = 401
        fake_cms.token_body = {"error": "invalid_client"}
        provider = make_provider(fake_cms)

        with pytest.raises(AuthenticationError) as exc_info:
            run_async(provider.get_token())

        assert "401" in exc_info.value.message
        assert "invalid_client" in exc_info.value.message
        assert exc_info.value.status_code == 401

    def test_missing_access_token(self, fake_cms: FakeCms) -> None:
        """Test that a 2xx body without access_token is rejected."""
        fake_cms.token_body = {"token_type": "Bearer"}
        provider = make_provider(fake_cms)

        with pytest.raises(AuthenticationError):
            run_async(provider.get_token())

    def test_invalid_json(self, fake_cms: FakeCms) -> None:
        """Test that a non-JSON 2xx body is rejected."""
        fake_cms.token_body = "<html>login</html>"
        provider = make_provider(fake_cms)

        with pytest.raises(AuthenticationError, match="invalid JSON"):
            run_async(provider.get_token())

    def test_network_failure(self) -> None:
        """Test that connection failures become TransportError."""
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        provider = TokenProvider(
            CmsConfig(cms_url=TEST_CMS_URL, client_id="a", client_secret="b"),
            httpx.AsyncClient(transport=httpx.MockTransport(refuse)),
        )

        with pytest.raises(TransportError, match="connection refused"):
            run_async(provider.get_token())

    def test_missing_url_makes_no_request(self, fake_cms: FakeCms) -> None:
        """Test that a missing CMS URL fails before any network call."""
        provider = make_provider(fake_cms, cms_url="")

        with pytest.raises(ConfigurationError, match="CMS URL is not configured."):
            run_async(provider.get_token())

        assert fake_cms.requests == []

    def test_missing_credentials_makes_no_request(self, fake_cms: FakeCms) -> None:
        """Test that missing credentials fail before any network call."""
        provider = make_provider(fake_cms, client_secret="")

        with pytest.raises(ConfigurationError):
            run_async(provider.get_token())

        assert fake_cms.requests == []

    def test_basic_mode(self, fake_cms: FakeCms) -> None:
        """Test that basic mode encodes credentials locally."""
        provider = make_provider(fake_cms, auth_mode="basic")

        token = run_async(provider.get_token())

        expected = base64.b64encode(f"{TEST_CLIENT_ID}:{TEST_CLIENT_SECRET}".encode()).decode()
        assert token == expected
        assert provider.scheme == "Basic"
        assert fake_cms.requests == []

    def test_token_is_cached(self, fake_cms: FakeCms) -> None:
        """Test that a valid token is reused."""
        provider = make_provider(fake_cms)

        async def twice() -> list[str]:
            return [await provider.get_token(), await provider.get_token()]

        assert run_async(twice()) == ["abc123", "abc123"]
        assert len(fake_cms.token_requests) == 1

    def test_cache_disabled_fetches_every_time(self, fake_cms: FakeCms) -> None:
        """Test that turning the cache off fetches a token per call."""
        provider = make_provider(fake_cms, cache_tokens=False)

        async def twice() -> None:
            await provider.get_token()
            await provider.get_token()

        run_async(twice())
        assert len(fake_cms.token_requests) == 2

    def test_expired_token_is_refetched(self, fake_cms: FakeCms) -> None:
        """Test that an expired token is refreshed."""
        provider = make_provider(fake_cms)

        with patch("src.signage.auth.time.monotonic", return_value=1000.0):
            run_async(provider.get_token())
        # expires_in 3600 minus the 60 s leeway
        with patch("src.signage.auth.time.monotonic", return_value=1000.0 + 3541):
            run_async(provider.get_token())

        assert len(fake_cms.token_requests) == 2

    def test_invalidate(self, fake_cms: FakeCms) -> None:
        """Test that invalidate forces a new fetch."""
        provider = make_provider(fake_cms)

        run_async(provider.get_token())
        provider.invalidate()
        run_async(provider.get_token())

        assert len(fake_cms.token_requests) == 2

    @pytest.mark.parametrize("expires_in", ["1h", None, "", [3600], True])
    def test_unreadable_expires_in_uses_default(self, fake_cms: FakeCms, expires_in: object) -> None:
        """Test that a bad expires_in falls back to one hour instead of failing."""
        fake_cms.token_body = {"access_token": "abc123", "expires_in": expires_in}
        provider = make_provider(fake_cms)

        with patch("src.signage.auth.time.monotonic", return_value=1000.0):
            assert run_async(provider.get_token()) == "abc123"
        with patch("src.signage.auth.time.monotonic", return_value=1000.0 + 3539):
            run_async(provider.get_token())

        assert len(fake_cms.token_requests) == 1

    def test_decimal_expires_in(self, fake_cms: FakeCms) -> None:
        """Test that a decimal expires_in string is accepted."""
        fake_cms.token_body = {"access_token": "abc123", "expires_in": "120.5"}
        provider = make_provider(fake_cms)

        with patch("src.signage.auth.time.monotonic", return_value=1000.0):
            run_async(provider.get_token())
        # 120 minus the 60 s leeway
        with patch("src.signage.auth.time.monotonic", return_value=1000.0 + 61):
            run_async(provider.get_token())

        assert len(fake_cms.token_requests) == 2

    def test_refresh_in_separate_event_loops(self, fake_cms: FakeCms) -> None:
        """Test that one provider refreshes from more than one event loop."""
        provider = make_provider(fake_cms)

        run_async(provider.get_token())
        provider.invalidate()
        fake_cms.token_body = {"access_token": "fresh", "expires_in": 3600}

        assert run_async(provider.get_token()) == "fresh"
        assert len(fake_cms.token_requests) == 2


class TestRequestHeaderBuilder:
    """Tests for RequestHeaderBuilder.build."""

    def test_bearer_headers(self, fake_cms: FakeCms) -> None:
        """Test the header set for OAuth mode."""
        builder = RequestHeaderBuilder(make_provider(fake_cms))

        headers = run_async(builder.build())

        assert headers == {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": "Bearer abc123",
        }

    def test_basic_headers(self, fake_cms: FakeCms) -> None:
        """Test the Authorization header for basic mode."""
        builder = RequestHeaderBuilder(make_provider(fake_cms, auth_mode="basic"))

        headers = run_async(builder.build())

        assert headers["Authorization"].startswith("Basic ")

    def test_provider_failure_propagates(self, fake_cms: FakeCms) -> None:
        """Test that token failures propagate unchanged."""
        fake_cms.token_status = 401
        fake_cms.token_body = {"error": "invalid_client"}
        builder = RequestHeaderBuilder(make_provider(fake_cms))

        with pytest.raises(AuthenticationError):
            run_async(builder.build())
