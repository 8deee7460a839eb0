"""
Xibo CMS authentication

Obtains credentials for the CMS API and assembles the headers sent with
every request:
- OAuth2 client-credentials flow against /api/authorize/access_token
- HTTP Basic auth built from the client id/secret (no network call)
- Optional time-bounded reuse of the access token between calls
"""

from __future__ import annotations

import asyncio
import base64
import logging
import time
from typing import Any, TypedDict

import httpx

from .config import CmsConfig
from .errors import AuthenticationError, TransportError

logger = logging.getLogger(__name__)

TOKEN_PATH = "/api/authorize/access_token"
# Refetch this many seconds before the CMS says the token expires
TOKEN_EXPIRY_LEEWAY_SECONDS = 60
DEFAULT_EXPIRES_IN = 3600


class TokenResponse(TypedDict, total=False):
    """Xibo token endpoint response."""

    access_token: str
    token_type: str
    expires_in: int


class TokenProvider:
    """
    Produces the credential used in the Authorization header.

    In "oauth" mode the client credentials are exchanged for a bearer token;
    in "basic" mode the credentials are base64 encoded locally.
    """

    def __init__(self, config: CmsConfig, http: httpx.AsyncClient) -> None:
        self.config = config
        self.http = http
        self._token: str | None = None
        self._expires_at: float = 0.0
        self._lock: asyncio.Lock | None = None

    @property
    def scheme(self) -> str:
        """Authorization scheme matching the configured auth mode."""
        return "Basic" if self.config.auth_mode == "basic" else "Bearer"

    def invalidate(self) -> None:
        """Forget any cached token so the next call fetches a fresh one."""
        self._token = None
        self._expires_at = 0.0

    def _cached(self) -> str | None:
        if self._token and time.monotonic() < self._expires_at:
            return self._token
        return None

    async def get_token(self) -> str:
        """
        Return a credential for the Authorization header.

        Raises:
            ConfigurationError: CMS URL or client credentials are missing
            AuthenticationError: The token endpoint returned a non-2xx status
            TransportError: The token endpoint could not be reached
        """
        self.config.require_cms_url()
        client_id, client_secret = self.config.require_credentials()

        if self.config.auth_mode == "basic":
            raw = f"{client_id}:{client_secret}".encode("utf-8")
            return base64.b64encode(raw).decode("ascii")

        if not self.config.cache_tokens:
            token, _ = await self._request_token(client_id, client_secret)
            return token

        cached = self._cached()
        if cached:
            return cached

        if self._lock is None:
            self._lock = asyncio.Lock()

        async with self._lock:
            # Another caller may have refreshed while we waited
            cached = self._cached()
            if cached:
                return cached

            token, expires_in = await self._request_token(client_id, client_secret)
            self._token = token
            self._expires_at = time.monotonic() + max(
                expires_in - TOKEN_EXPIRY_LEEWAY_SECONDS, 0
            )
            return token

    async def _request_token(self, client_id: str, client_secret: str) -> tuple[str, int]:
        token_url = f"{self.config.cms_url}{TOKEN_PATH}"
        logger.debug(f"Requesting access token from: {token_url}")

        try:
            response = await self.http.post(
                token_url,
                data={
                    "grant_type": "client_credentials",
                    "client_id": client_id,
                    "client_secret": client_secret,
                },
                headers={
                    "Content-Type": "application/x-www-form-urlencoded",
                    "Accept": "application/json",
                },
            )
        except httpx.TransportError as e:
            logger.error(f"Network error during token request: {e}")
            raise TransportError(f"Could not reach token endpoint {token_url}: {e}") from e

        if not response.is_success:
            logger.error(f"Access token request failed: {response.status_code} - {response.text}")
            raise AuthenticationError(
                f"Failed to obtain access token: {response.status_code} - {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            token_data: TokenResponse = response.json()
        except ValueError as e:
            raise AuthenticationError(
                f"Token endpoint returned invalid JSON: {response.text}",
                status_code=response.status_code,
                body=response.text,
            ) from e

        access_token = token_data.get("access_token") if isinstance(token_data, dict) else None
        if not access_token:
            raise AuthenticationError(
                "No access token in token endpoint response",
                status_code=response.status_code,
                body=response.text,
            )

        expires_in = _parse_expires_in(token_data.get("expires_in"))
        logger.info("Access token obtained successfully")
        logger.debug(f"Token will expire in {expires_in} seconds")
        return access_token, expires_in


def _parse_expires_in(value: Any) -> int:
    """Seconds until expiry; missing or unreadable values fall back to the default."""
    if isinstance(value, bool) or value in (None, ""):
        return DEFAULT_EXPIRES_IN
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.warning(f"Ignoring invalid expires_in from token endpoint: {value!r}")
        return DEFAULT_EXPIRES_IN


class RequestHeaderBuilder:
    """Builds the header set for an outbound CMS request."""

    def __init__(self, provider: TokenProvider) -> None:
        self.provider = provider

    async def build(self) -> dict[str, Any]:
        """
        Return headers with JSON content type and the Authorization credential.

        Callers sending form or multipart bodies override Content-Type.
        Failures from the token provider propagate unchanged.
        """
        token = await self.provider.get_token()
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"{self.provider.scheme} {token}",
        }
