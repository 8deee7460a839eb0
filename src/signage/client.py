"""
Xibo CMS API Client

Async client for the Xibo CMS REST API.
Handles authentication headers, body encoding, error decoding and empty
(204) responses. One HTTP call per request, no retries.
"""

from __future__ import annotations

import json as json_lib
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from .auth import RequestHeaderBuilder, TokenProvider
from .config import CmsConfig
from .decoding import decode_error_message
from .errors import ApiError, ConfigurationError, TransportError, ValidationError

logger = logging.getLogger(__name__)


@dataclass
class XiboClient:
    """
    Client for the Xibo CMS API.

    Usage:
        client = XiboClient(CmsConfig.from_env())

        # List displays
        displays = await client.request("GET", "/api/display", params={"display": "Lobby"})

        # Create a tag (form encoded)
        tag = await client.request("POST", "/api/tag", data={"name": "promo"})

        # Delete a tag (204, returns None)
        await client.request("DELETE", "/api/tag/12")
    """

    config: CmsConfig
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)
    _client: httpx.AsyncClient | None = field(default=None, repr=False, init=False)
    tokens: TokenProvider = field(init=False, repr=False)
    headers: RequestHeaderBuilder = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            timeout=self.config.timeout,
            transport=self.transport,
        )
        self.tokens = TokenProvider(self.config, self._client)
        self.headers = RequestHeaderBuilder(self.tokens)

    @property
    def client(self) -> httpx.AsyncClient:
        """Get the HTTP client, raising if not initialized."""
        if self._client is None:
            raise RuntimeError("Client not initialized")
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()

    async def __aenter__(self) -> "XiboClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """
        Perform one authenticated request against the CMS.

        Args:
            method: HTTP method
            path: Path below the CMS base URL, e.g. "/api/display/12"
            params: Query string parameters
            data: URL-encoded form fields (or multipart fields with files)
            files: Multipart file parts
            json: JSON body

        Returns:
            Parsed JSON body, or None for an empty/204 response

        Raises:
            ConfigurationError: CMS URL is not configured (no request is made)
            AuthenticationError: Token could not be obtained
            TransportError: The CMS could not be reached
            ApiError: The CMS answered with a non-2xx status
            ValidationError: A 2xx body was not valid JSON
        """
        base_url = self.config.require_cms_url()
        url = f"{base_url}{path}"

        headers = await self.headers.build()
        if files:
            # httpx sets the multipart boundary itself
            headers.pop("Content-Type", None)
        elif data is not None:
            headers["Content-Type"] = "application/x-www-form-urlencoded"

        logger.debug(f"{method} {url}")

        try:
            response = await self.client.request(
                method,
                url,
                params=params,
                data=data,
                files=files,
                json=json,
                headers=headers,
            )
        except httpx.TransportError as e:
            logger.error(f"Network error during {method} {url}: {e}")
            raise TransportError(f"Could not reach the CMS at {url}: {e}") from e

        text = response.text
        if not response.is_success:
            message = decode_error_message(text)
            if not isinstance(message, str) or not message.strip():
                message = f"HTTP {response.status_code}"
            logger.error(f"{method} {path} failed: {response.status_code} - {message}")
            if response.status_code == 401:
                # Rejected credential: the next call fetches a new token
                self.tokens.invalidate()
            raise ApiError(response.status_code, str(message), body=_parse_or_text(text))

        if response.status_code == 204 or not text.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ValidationError(
                f"CMS returned a non-JSON body for {method} {path}",
                raw=text,
            ) from e


def _parse_or_text(text: str) -> Any:
    try:
        return json_lib.loads(text)
    except ValueError:
        return text


# Singleton instance for tool functions
_client: XiboClient | None = None


def get_client() -> XiboClient:
    """Get the global Xibo client instance."""
    if _client is None:
        raise ConfigurationError(
            "Xibo client not initialized. "
            "Call init_client(config) first."
        )
    return _client


def init_client(config: CmsConfig, transport: httpx.AsyncBaseTransport | None = None) -> XiboClient:
    """Initialize the global Xibo client."""
    global _client
    _client = XiboClient(config=config, transport=transport)
    return _client
