"""
Xibo CMS error taxonomy

Every expected failure of a CMS call is one of these exceptions. Tools catch
them at their boundary and turn them into structured failure results via
``to_result()`` so the agent sees a recoverable error instead of a traceback.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Machine-readable error categories carried in failure results."""

    CONFIGURATION = "configuration_error"
    INPUT = "input_error"
    AUTHENTICATION = "authentication_error"
    TRANSPORT = "transport_error"
    API = "api_error"
    VALIDATION = "validation_error"


class XiboError(Exception):
    """Base exception for all Xibo CMS client failures."""

    kind: ErrorKind = ErrorKind.API

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_result(self) -> dict[str, Any]:
        """Structured failure mapping: {success, message, error}."""
        return {
            "success": False,
            "message": self.message,
            "error": {"type": self.kind.value},
        }


class ConfigurationError(XiboError):
    """Required configuration (CMS URL, credentials) is missing or invalid."""

    kind = ErrorKind.CONFIGURATION


class InputError(XiboError):
    """A tool was called without the arguments its endpoint needs."""

    kind = ErrorKind.INPUT


class TransportError(XiboError):
    """The CMS could not be reached (DNS, timeout, connection refused)."""

    kind = ErrorKind.TRANSPORT


class AuthenticationError(XiboError):
    """The token endpoint rejected the client credentials."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    def to_result(self) -> dict[str, Any]:
        result = super().to_result()
        if self.status_code is not None:
            result["status"] = self.status_code
        if self.body:
            result["errorData"] = self.body
        return result


class ApiError(XiboError):
    """The CMS answered with a non-2xx status."""

    kind = ErrorKind.API

    def __init__(self, status_code: int, message: str, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    def to_result(self) -> dict[str, Any]:
        result = super().to_result()
        result["status"] = self.status_code
        result["error"]["status"] = self.status_code
        if self.body not in (None, ""):
            result["errorData"] = self.body
        return result


class ValidationError(XiboError):
    """A 2xx payload did not match the schema of the requested resource."""

    kind = ErrorKind.VALIDATION

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        raw: Any = None,
    ) -> None:
        self.errors = errors or []
        self.raw = raw
        super().__init__(message)

    def to_result(self) -> dict[str, Any]:
        result = super().to_result()
        result["error"]["details"] = self.errors
        result["errorData"] = self.raw
        return result
