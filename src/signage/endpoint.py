"""
Declarative CMS endpoints

Every tool wraps exactly one CMS call. Instead of hand-writing the same
request/validate/error-handling code per entity, each call is described by an
``Endpoint`` (method, path template, parameters, response schema) and executed
by the same code path:

1. Check the CMS URL is configured (no network call otherwise)
2. Build the path, query string and body from the caller's arguments
3. Send the request with authenticated headers
4. Turn non-2xx answers into an API-error result with the decoded message
5. Normalise and validate 2xx bodies against the response schema
6. Report empty (204) answers as a plain success
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Callable
from urllib.parse import quote

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .client import XiboClient
from .config import CmsConfig
from .decoding import normalize_payload, parse_json_fields
from .errors import InputError, ValidationError, XiboError

logger = logging.getLogger(__name__)

PATH = "path"
QUERY = "query"
BODY = "body"
FILE = "file"

_JSON_TYPES: dict[type, str] = {
    str: "string",
    int: "integer",
    float: "number",
    bool: "boolean",
    list: "array",
    dict: "object",
}


@dataclass(frozen=True)
class Param:
    """
    One tool argument and how it reaches the CMS.

    ``location`` is inferred when left empty: names that appear in the path
    template go into the path, GET/DELETE arguments into the query string and
    everything else into the body. Lists are sent comma separated ("csv"),
    as repeated ``name[]`` fields ("brackets") or as a JSON string ("json").
    A dict with style "fields" is sent as one field per key.
    """

    name: str
    type: type = str
    required: bool = False
    description: str = ""
    location: str = ""
    wire_name: str | None = None
    style: str = "csv"
    items: type = int
    enum: tuple[str, ...] | None = None

    @property
    def key(self) -> str:
        return self.wire_name or self.name

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": _JSON_TYPES.get(self.type, "string")}
        if self.type is list:
            schema["items"] = {"type": _JSON_TYPES.get(self.items, "string")}
        if self.enum:
            schema["enum"] = list(self.enum)
        if self.description:
            schema["description"] = self.description
        return schema


@dataclass
class ToolResult:
    """The single result shape every tool returns, success or failure."""

    success: bool
    data: Any = None
    message: str | None = None
    error: Any = None
    error_data: Any = None
    status: int | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_error(cls, error: XiboError) -> "ToolResult":
        result = error.to_result()
        return cls(
            success=False,
            message=result["message"],
            error=result.get("error"),
            error_data=result.get("errorData"),
            status=result.get("status"),
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"success": self.success}
        if self.success:
            out["data"] = self.data
        if self.message is not None:
            out["message"] = self.message
        if self.error is not None:
            out["error"] = self.error
        if self.error_data is not None:
            out["errorData"] = self.error_data
        if self.status is not None:
            out["status"] = self.status
        out.update(self.extra)
        return out


@dataclass
class PreparedRequest:
    method: str
    path: str
    params: dict[str, Any] | None = None
    data: dict[str, Any] | None = None
    json: Any = None
    files: dict[str, Any] | None = None


def _encode_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, dict):
        return json.dumps(value)
    return str(value)


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == []


@dataclass(frozen=True)
class Endpoint:
    """
    Request descriptor for one CMS operation.

    Args:
        name: Tool name exposed to the agent
        description: Tool description exposed to the agent
        method: HTTP method
        path: Path template, e.g. "/api/display/{displayId}"
        params: Accepted arguments
        response: pydantic model the 2xx body must match (None: accept any JSON)
        many: Whether the body is a list of ``response``
        body: Body encoding for non-query arguments: "form", "json" or "multipart"
        success_message: Message reported for empty (204) answers
        postprocess: Adds extra keys to a successful result from its data
        parse_json: Names of fields whose string values hold JSON to parse before validating
    """

    name: str
    description: str
    method: str
    path: str
    params: tuple[Param, ...] = ()
    response: Any = None
    many: bool = False
    body: str = "form"
    success_message: str | None = None
    postprocess: Callable[[Any], dict[str, Any]] | None = None
    parse_json: tuple[str, ...] = ()

    def location_of(self, param: Param) -> str:
        if param.location:
            return param.location
        if "{" + param.name + "}" in self.path:
            return PATH
        if self.method in ("GET", "DELETE"):
            return QUERY
        return BODY

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool arguments."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.params},
            "required": [p.name for p in self.params if p.required],
        }

    @cached_property
    def adapter(self) -> TypeAdapter[Any] | None:
        if self.response is None:
            return None
        return TypeAdapter(list[self.response] if self.many else self.response)

    def build_request(self, args: dict[str, Any], config: CmsConfig) -> PreparedRequest:
        """
        Turn tool arguments into a request, dropping empty optional values.

        Raises:
            InputError: A required argument is missing, or an upload file does not exist
        """
        path = self.path
        query: dict[str, Any] = {}
        body: dict[str, Any] = {}
        files: dict[str, Any] = {}

        for param in self.params:
            value = args.get(param.name)
            if _is_empty(value):
                if param.required:
                    raise InputError(f"Missing required argument '{param.name}' for {self.name}")
                continue

            location = self.location_of(param)
            if location == PATH:
                path = path.replace("{" + param.name + "}", quote(_encode_scalar(value), safe=""))
            elif location == FILE:
                files[param.key] = self._read_file(str(value), config)
            elif location == BODY and self.body == "json":
                body[param.key] = value
            else:
                target = query if location == QUERY else body
                self._encode_into(target, param, value)

        request = PreparedRequest(method=self.method, path=path)
        if query:
            request.params = query
        if self.body == "json":
            request.json = body or None
        elif self.body == "multipart":
            request.data = body
            request.files = files or None
        elif body or self.method in ("POST", "PUT"):
            request.data = body
        return request

    @staticmethod
    def _encode_into(target: dict[str, Any], param: Param, value: Any) -> None:
        if isinstance(value, dict) and param.style == "fields":
            for key, item in value.items():
                if not _is_empty(item):
                    target[str(key)] = _encode_scalar(item)
        elif isinstance(value, (list, tuple)):
            if param.style == "brackets":
                target[f"{param.key}[]"] = [_encode_scalar(v) for v in value]
            elif param.style == "json":
                target[param.key] = json.dumps(list(value))
            else:
                target[param.key] = ",".join(_encode_scalar(v) for v in value)
        else:
            target[param.key] = _encode_scalar(value)

    @staticmethod
    def _read_file(file_path: str, config: CmsConfig) -> tuple[str, bytes]:
        resolved = file_path if os.path.isabs(file_path) else os.path.join(config.upload_dir, file_path)
        if not os.path.isfile(resolved):
            raise InputError(f"File not found: {resolved}")
        with open(resolved, "rb") as f:
            return os.path.basename(resolved), f.read()

    def validate(self, payload: Any) -> Any:
        """
        Normalise and validate a 2xx body, returning JSON-ready data.

        Raises:
            ValidationError: The body does not match the response schema
        """
        if self.adapter is None:
            return payload

        if self.parse_json:
            payload = parse_json_fields(payload, self.parse_json)

        normalized = normalize_payload(payload, self.many)
        if normalized is None:
            raise ValidationError(
                f"{self.name}: CMS returned a successful status but no data.",
                raw=payload,
            )

        try:
            validated = self.adapter.validate_python(normalized)
        except PydanticValidationError as e:
            raise ValidationError(
                f"{self.name}: response validation failed.",
                errors=e.errors(include_url=False, include_context=False),
                raw=payload,
            ) from e

        return self.adapter.dump_python(validated, mode="json", exclude_unset=True)

    async def execute(self, client: XiboClient, args: dict[str, Any]) -> ToolResult:
        """Run the request and return a structured result; never raises XiboError."""
        try:
            client.config.require_cms_url()
            request = self.build_request(args or {}, client.config)
            payload = await client.request(
                request.method,
                request.path,
                params=request.params,
                data=request.data,
                files=request.files,
                json=request.json,
            )
            if payload is None:
                logger.info(f"{self.name}: CMS returned no content")
                return ToolResult(
                    success=True,
                    data=None,
                    message=self.success_message or "Operation completed successfully.",
                )
            data = self.validate(payload)
        except XiboError as e:
            logger.error(f"{self.name} failed: {e.message}")
            return ToolResult.from_error(e)

        result = ToolResult(success=True, data=data)
        if self.postprocess is not None:
            result.extra = self.postprocess(data)
        logger.info(f"{self.name} succeeded")
        return result
