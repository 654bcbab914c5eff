"""Pytest configuration for all tests."""

import json
from typing import Any
from unittest.mock import MagicMock

import httpx
import pytest

from pug_client.client import PugClient
from pug_client.core.config import Settings, get_settings
from pug_client.tracking.patch import PatchKeyStyle

API_HOST = "https://api.video.scorevision.com"
TOKEN_URL = "https://fantagio.auth0.com/oauth/token"


class FakeOwner:
    """Minimal mutation receiver for tracked container tests."""

    def __init__(self) -> None:
        self.dirty_calls = 0
        self.frozen = False

    def mark_dirty(self) -> None:
        self.dirty_calls += 1

    def is_frozen(self) -> bool:
        return self.frozen


class FakeApi:
    """Scripted HTTP backend for ``httpx.MockTransport``.

    Responses are registered per (method, path). When several responses are
    registered for one route they are served in order, the last one
    repeating. Unknown routes answer 404 with a JSON:API error document.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[dict[str, Any]]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        text: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.routes.setdefault((method, path), []).append(
            {"status_code": status_code, "json": json, "text": text, "headers": headers}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(404, json={"errors": [{"detail": "No such route"}]})
        entry = queue.pop(0) if len(queue) > 1 else queue[0]
        if entry["json"] is not None:
            return httpx.Response(entry["status_code"], json=entry["json"], headers=entry["headers"])
        if entry["text"] is not None:
            return httpx.Response(entry["status_code"], text=entry["text"], headers=entry["headers"])
        return httpx.Response(entry["status_code"], headers=entry["headers"])

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_body(self) -> Any:
        return json.loads(self.last_request.content)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Keep the cached default settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with a pre-issued token, so no client-credentials exchange happens."""
    return Settings(
        _env_file=None,
        environment="production",
        namespace="test-ns",
        access_token="test-token",
    )


@pytest.fixture
def credential_settings() -> Settings:
    """Settings that authenticate through the client-credentials flow."""
    return Settings(
        _env_file=None,
        environment="production",
        namespace="test-ns",
        client_id="client-123",
        client_secret="secret-456",
    )


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(settings: Settings, fake_api: FakeApi):
    """PugClient wired to the fake API."""
    pug = PugClient(settings, transport=httpx.MockTransport(fake_api))
    yield pug
    pug.close()


@pytest.fixture
def mock_client() -> MagicMock:
    """Stand-in for PugClient when only the calls made on it matter."""
    mock = MagicMock(spec=PugClient)
    mock.per_page = 10
    mock.patch_key_style = PatchKeyStyle.CAMEL
    return mock


@pytest.fixture
def owner() -> FakeOwner:
    return FakeOwner()
