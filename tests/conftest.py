"""
Root test configuration and fixtures.

Provides a fake Xibo CMS served through httpx.MockTransport. Every request
the client sends is recorded, so tests can assert on exactly what went over
the wire (or that nothing did).
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Callable
from urllib.parse import parse_qs

import httpx
import pytest

from src.signage.auth import TOKEN_PATH
from src.signage.client import XiboClient
from src.signage.config import CmsConfig

TEST_CMS_URL = "https://cms.test"
TEST_CLIENT_ID = "client-id-123"
TEST_CLIENT_SECRET = "client-secret-456"
TEST_ACCESS_TOKEN = "abc123"

Handler = Callable[[httpx.Request], httpx.Response]


def run_async(coro: Any) -> Any:
    """Helper to run async coroutines in sync tests."""
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def form_fields(request: httpx.Request) -> dict[str, list[str]]:
    """Decode a URL-encoded request body."""
    return parse_qs(request.content.decode(), keep_blank_values=True)


class FakeCms:
    """
    In-memory stand-in for a Xibo CMS.

    Usage:
        cms = FakeCms()
        cms.add("GET", "/api/tag", json=[{"tagId": 1, "tag": "promo"}])
        client = XiboClient(config, transport=cms.transport)
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Handler] = {}
        # Used for any route not registered with add()
        self.fallback: Handler | None = None
        self.token_status = 200
        self.token_body: Any = {"access_token": TEST_ACCESS_TOKEN, "token_type": "Bearer", "expires_in": 3600}
        self.transport = httpx.MockTransport(self.handle)

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        text: str | None = None,
        handler: Handler | None = None,
    ) -> None:
        """Register a canned response (or a handler) for a method and path."""
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                if text is not None:
                    return httpx.Response(status, text=text)
                if json is None:
                    return httpx.Response(status)
                return httpx.Response(status, json=json)
        self.routes[(method.upper(), path)] = handler

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == TOKEN_PATH:
            if isinstance(self.token_body, str):
                return httpx.Response(self.token_status, text=self.token_body)
            return httpx.Response(self.token_status, json=self.token_body)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            handler = self.fallback
        if handler is None:
            return httpx.Response(404, json={"error": {"message": "Not Found", "code": 404}})
        return handler(request)

    @property
    def token_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == TOKEN_PATH]

    @property
    def api_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path != TOKEN_PATH]

    @property
    def last(self) -> httpx.Request:
        return self.api_requests[-1]


class TagStore:
    """Stateful /api/tag routes backed by a list."""

    def __init__(self, cms: FakeCms) -> None:
        self.tags: list[dict[str, Any]] = []
        cms.add("GET", "/api/tag", handler=self.list_tags)
        cms.add("POST", "/api/tag", handler=self.create_tag)

    def list_tags(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=self.tags)

    def create_tag(self, request: httpx.Request) -> httpx.Response:
        fields = form_fields(request)
        tag = {
            "tagId": len(self.tags) + 1,
            "tag": fields["name"][0],
            "isSystem": 0,
            "isRequired": int(fields.get("isRequired", ["0"])[0]),
            "options": json.dumps(fields["options"][0].split(",")) if "options" in fields else None,
        }
        self.tags.append(tag)
        return httpx.Response(201, json=tag)


@pytest.fixture
def cms_config() -> CmsConfig:
    """Config pointing at the fake CMS."""
    return CmsConfig(
        cms_url=TEST_CMS_URL,
        client_id=TEST_CLIENT_ID,
        client_secret=TEST_CLIENT_SECRET,
    )


@pytest.fixture
def fake_cms() -> FakeCms:
    """Provide a recording fake CMS."""
    return FakeCms()


@pytest.fixture
def xibo_client(cms_config: CmsConfig, fake_cms: FakeCms) -> XiboClient:
    """Provide a XiboClient wired to the fake CMS."""
    return XiboClient(cms_config, transport=fake_cms.transport)


@pytest.fixture
def unconfigured_client(fake_cms: FakeCms) -> XiboClient:
    """Provide a XiboClient with no CMS URL configured."""
    return XiboClient(CmsConfig(), transport=fake_cms.transport)


# Sample CMS entities

SAMPLE_TAG = {"tagId": 7, "tag": "promo", "isSystem": 0, "isRequired": 0, "options": None}

SAMPLE_DISPLAY = {
    "displayId": 12,
    "display": "Lobby Screen",
    "displayGroupId": 30,
    "defaultLayoutId": 4,
    "license": "hw-key-abc",
    "licensed": 1,
    "loggedIn": 1,
    "lastAccessed": "2024-05-01 09:00:00",
    "clientType": "android",
    "tags": [{"tagId": 7, "tag": "promo", "value": None}],
}

SAMPLE_DISPLAY_GROUP = {
    "displayGroupId": 31,
    "displayGroup": "Lobby",
    "isDynamic": 0,
    "isDisplaySpecific": 0,
}

SAMPLE_LAYOUT = {
    "layoutId": 40,
    "layout": "Welcome",
    "campaignId": 41,
    "publishedStatusId": 1,
    "publishedStatus": "Published",
    "width": 1920,
    "height": 1080,
    "duration": 60,
    "retired": 0,
}

SAMPLE_CAMPAIGN = {"campaignId": 7, "campaign": "Summer", "type": "list", "numberLayouts": 2}

SAMPLE_SCHEDULE_EVENT = {
    "eventId": 100,
    "eventTypeId": 5,
    "campaignId": 7,
    "fromDt": "2024-06-01 09:00:00",
    "toDt": "2024-06-01 17:00:00",
    "isPriority": 0,
    "displayOrder": 0,
}

SAMPLE_USER = {"userId": 1, "userName": "admin", "userTypeId": 1, "email": "admin@example.com"}

SAMPLE_USER_GROUP = {"groupId": 5, "group": "Editors", "isUserSpecific": 0}

SAMPLE_FOLDERS = [
    {
        "id": 1,
        "text": "Root",
        "type": "root",
        "isRoot": 1,
        "children": [
            {"id": 2, "text": "Promotions", "parentId": 1, "children": []},
            {
                "id": 3,
                "text": "Menus",
                "parentId": 1,
                "children": [{"id": 4, "text": "Breakfast", "parentId": 3, "children": ""}],
            },
        ],
    }
]

SAMPLE_MEDIA = {"mediaId": 55, "name": "promo.png", "mediaType": "image", "fileSize": 2048}

SAMPLE_WIDGET = {"widgetId": 90, "playlistId": 60, "type": "text", "duration": 10, "displayOrder": 1}

SAMPLE_PLAYLIST = {
    "playlistId": 60,
    "name": "Lobby loop",
    "isDynamic": 0,
    "duration": 10,
    "widgets": [SAMPLE_WIDGET],
}

SAMPLE_DATA_SET = {"dataSetId": 20, "dataSet": "Menu prices", "code": "menu", "isRemote": 0}
