"""
Response decoding helpers

The CMS is inconsistent about error envelopes and about whether list
endpoints wrap their payload. These helpers turn whatever came back into
something readable (errors) or into the shape a schema expects (data).
"""

from __future__ import annotations

import html
import json
import re
from typing import Any
from urllib.parse import unquote

_TAG_RE = re.compile(r"<[^>]+>")
_SCRIPT_RE = re.compile(r"<(script|style)[^>]*>.*?</\1>", re.IGNORECASE | re.DOTALL)
_WS_RE = re.compile(r"\s+")
_FENCE_RE = re.compile(r"```(?:json)?\n([\s\S]*?)\n```")


def _unquote(text: str) -> str:
    try:
        return unquote(text)
    except (TypeError, ValueError):
        return text


def _format_path(path: Any) -> str:
    if isinstance(path, (list, tuple)):
        return ".".join(str(part) for part in path)
    return str(path) if path is not None else ""


def _from_issues(issues: list[Any]) -> str | None:
    """Zod-style {"issues": [{"path": [...], "message": "..."}]}."""
    parts: list[str] = []
    for issue in issues:
        if not isinstance(issue, dict) or "message" not in issue:
            continue
        path = _format_path(issue.get("path"))
        parts.append(f"{path}: {issue['message']}" if path else str(issue["message"]))
    return "; ".join(parts) if parts else None


def _from_flattened(obj: dict[str, Any]) -> str | None:
    """Zod flatten() output: {"formErrors": [...], "fieldErrors": {field: [...]}}."""
    parts: list[str] = [str(m) for m in obj.get("formErrors") or []]
    for field, messages in (obj.get("fieldErrors") or {}).items():
        if isinstance(messages, list):
            messages = ", ".join(str(m) for m in messages)
        parts.append(f"{field}: {messages}")
    return "; ".join(parts) if parts else None


def _from_object(obj: Any) -> str | None:
    if isinstance(obj, str):
        return _unquote(obj)
    if not isinstance(obj, dict):
        return None

    message = obj.get("message")
    if isinstance(message, str) and message:
        return _unquote(message)

    error = obj.get("error")
    if isinstance(error, (str, dict)):
        decoded = _from_object(error)
        if decoded:
            return decoded

    if isinstance(obj.get("issues"), list):
        decoded = _from_issues(obj["issues"])
        if decoded:
            return decoded

    if "fieldErrors" in obj or "formErrors" in obj:
        return _from_flattened(obj)

    errors = obj.get("errors")
    if isinstance(errors, list):
        parts = [p for p in (_from_object(e) for e in errors) if p]
        if parts:
            return "; ".join(parts)

    return None


def _strip_html(text: str) -> str | None:
    stripped = _SCRIPT_RE.sub(" ", text)
    stripped = _WS_RE.sub(" ", html.unescape(_TAG_RE.sub(" ", stripped))).strip()
    return stripped or None


def decode_error_message(raw: Any) -> Any:
    """
    Best-effort conversion of a CMS error payload into a readable message.

    Accepts the raw response text or an already parsed object. Understands
    ``{"message": ...}`` (URL-encoded messages are decoded), ``{"error": ...}``
    envelopes, Zod-like validation objects and HTML error pages. Anything
    it cannot make sense of is returned unchanged; it never raises.
    """
    try:
        if isinstance(raw, (bytes, bytearray)):
            raw = raw.decode("utf-8", errors="replace")

        if isinstance(raw, str):
            text = raw.strip()
            if not text:
                return raw
            if text.startswith("{") or text.startswith("["):
                try:
                    parsed = json.loads(text)
                except ValueError:
                    return raw
                return _from_object(parsed) or raw
            if text.startswith("<"):
                return _strip_html(text) or raw
            return raw

        return _from_object(raw) or raw
    except Exception:
        return raw


def parse_json_strings(obj: Any) -> Any:
    """
    Recursively replace string values that hold JSON with the parsed value.

    Strings wrapped in a ```json fenced block are unwrapped first. Strings
    that only look like JSON but fail to parse are kept as they are.
    """
    if isinstance(obj, list):
        return [parse_json_strings(item) for item in obj]
    if isinstance(obj, dict):
        return {key: parse_json_strings(value) for key, value in obj.items()}
    if isinstance(obj, str):
        candidate = obj.strip()
        fenced = _FENCE_RE.search(candidate)
        if fenced:
            candidate = fenced.group(1).strip()
        if candidate.startswith("[") or candidate.startswith("{"):
            try:
                return parse_json_strings(json.loads(candidate))
            except ValueError:
                return obj
    return obj


def normalize_payload(payload: Any, many: bool) -> Any:
    """
    Bring a response body into the shape its schema expects.

    ``{"data": X}`` envelopes are unwrapped. List resources turn a bare object
    into a one-element list; single resources take the first element of a
    list (``None`` for an empty one).
    """
    if isinstance(payload, dict) and "data" in payload and set(payload) <= {
        "data", "success", "message", "meta", "recordsTotal", "recordsFiltered", "draw",
    }:
        payload = payload["data"]

    if many:
        if isinstance(payload, dict):
            return [payload]
        return payload

    if isinstance(payload, list):
        return payload[0] if payload else None
    return payload


def parse_json_fields(obj: Any, fields: tuple[str, ...]) -> Any:
    """
    Parse JSON held in the named fields only, wherever they occur.

    Other strings (entity names such as "[2024]") are left as sent.
    """
    if isinstance(obj, list):
        return [parse_json_fields(item, fields) for item in obj]
    if isinstance(obj, dict):
        return {
            key: parse_json_strings(value) if key in fields else parse_json_fields(value, fields)
            for key, value in obj.items()
        }
    return obj
