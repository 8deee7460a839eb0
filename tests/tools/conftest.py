"""
Shared test fixtures for Xibo CMS tool tests.
"""

from __future__ import annotations

import json
from typing import Any, Iterator
from unittest.mock import patch

import pytest

from src.signage.client import XiboClient
from src.signage.tools import TOOLS_BY_NAME

from ..conftest import FakeCms, run_async


def call_tool(name: str, args: dict[str, Any] | None = None) -> dict[str, Any]:
    """Invoke a registered tool's handler and return the raw tool response."""
    return run_async(TOOLS_BY_NAME[name].handler(args or {}))


def result_of(response: dict[str, Any]) -> dict[str, Any]:
    """Decode the ToolResult JSON carried in a tool response."""
    return json.loads(response["content"][0]["text"])


@pytest.fixture
def patch_get_client(xibo_client: XiboClient) -> Iterator[XiboClient]:
    """Patch the get_client function to return a client wired to the fake CMS."""
    with patch("src.signage.tools.get_client", return_value=xibo_client):
        yield xibo_client


@pytest.fixture
def patch_unconfigured_client(unconfigured_client: XiboClient) -> Iterator[XiboClient]:
    """Patch get_client with a client that has no CMS URL."""
    with patch("src.signage.tools.get_client", return_value=unconfigured_client):
        yield unconfigured_client


def form_of(cms: FakeCms) -> dict[str, list[str]]:
    """Form fields of the last API request."""
    from ..conftest import form_fields

    return form_fields(cms.last)
