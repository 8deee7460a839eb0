"""
Xibo CMS configuration

Connection settings for the CMS, read once from the environment (or a .env
file) and passed explicitly to the client, token provider and tools.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigurationError

AUTH_MODES = ("oauth", "basic")

DEFAULT_TIMEOUT = 30.0
DEFAULT_UPLOAD_DIR = os.path.join("persistent_data", "uploads")


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class CmsConfig:
    """
    Settings for talking to a Xibo CMS instance.

    Usage:
        config = CmsConfig.from_env()
        async with XiboClient(config) as client:
            displays = await client.request("GET", "/api/display")
    """

    cms_url: str = ""
    client_id: str = ""
    client_secret: str = ""
    auth_mode: str = "oauth"
    timeout: float = DEFAULT_TIMEOUT
    cache_tokens: bool = True
    upload_dir: str = DEFAULT_UPLOAD_DIR

    def __post_init__(self) -> None:
        # Frozen, so normalise through object.__setattr__
        object.__setattr__(self, "cms_url", (self.cms_url or "").strip().rstrip("/"))
        if self.auth_mode not in AUTH_MODES:
            raise ConfigurationError(
                f"Unknown auth mode '{self.auth_mode}'. Expected one of: {', '.join(AUTH_MODES)}"
            )

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> "CmsConfig":
        """
        Build a config from environment variables.

        Args:
            env: Mapping to read from (defaults to os.environ)

        Returns:
            CmsConfig populated from CMS_URL, XIBO_CLIENT_ID, XIBO_CLIENT_SECRET,
            XIBO_AUTH_MODE, XIBO_TIMEOUT, XIBO_CACHE_TOKENS and XIBO_UPLOAD_DIR
        """
        source = os.environ if env is None else env

        raw_timeout = source.get("XIBO_TIMEOUT", "")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"XIBO_TIMEOUT must be a number, got '{raw_timeout}'") from e

        return cls(
            cms_url=source.get("CMS_URL", ""),
            client_id=source.get("XIBO_CLIENT_ID", ""),
            client_secret=source.get("XIBO_CLIENT_SECRET", ""),
            auth_mode=source.get("XIBO_AUTH_MODE", "oauth").strip().lower() or "oauth",
            timeout=timeout,
            cache_tokens=_as_bool(source.get("XIBO_CACHE_TOKENS"), True),
            upload_dir=source.get("XIBO_UPLOAD_DIR") or DEFAULT_UPLOAD_DIR,
        )

    def require_cms_url(self) -> str:
        """Return the CMS base URL, raising if it has not been configured."""
        if not self.cms_url:
            raise ConfigurationError("CMS URL is not configured.")
        return self.cms_url

    def require_credentials(self) -> tuple[str, str]:
        """Return (client_id, client_secret), raising if either is missing."""
        if not self.client_id or not self.client_secret:
            raise ConfigurationError(
                "Xibo client credentials are not configured. "
                "Set XIBO_CLIENT_ID and XIBO_CLIENT_SECRET."
            )
        return self.client_id, self.client_secret
