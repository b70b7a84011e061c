"""Pytest configuration and fixtures for todoist-mcp tests."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest

from todoist_mcp.client.rate_limit import RateWindow
from todoist_mcp.client.todoist_api import TodoistApiClient
from todoist_mcp.core.config import Settings
from todoist_mcp.tools import ToolDispatcher

TEST_API_KEY = "0123456789abcdef0123456789abcdef01234567"  # pragma: allowlist secret
TEST_BASE_URL = "https://api.todoist.test/api/v1"

Responder = httpx.Response | Callable[[httpx.Request], httpx.Response]


class FakeTodoistAPI:
    """httpx transport handler that records requests and replays canned responses.

    Routes are keyed by ``(method, path)`` where ``path`` is relative to the
    API base URL. Unrouted requests get ``200 {}``.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Responder] = {}

    def add(self, method: str, path: str, response: Responder) -> None:
        self.routes[(method.upper(), path)] = response

    def json(self, method: str, path: str, payload: Any, status_code: int = 200) -> None:
        self.add(method, path, httpx.Response(status_code, json=payload))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix(httpx.URL(TEST_BASE_URL).path)
        responder = self.routes.get((request.method, path), httpx.Response(200, json={}))
        if callable(responder):
            return responder(request)
        return responder

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


class FakeClock:
    """Controllable time source for RateWindow tests."""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the process environment and any .env file."""
    return Settings(
        todoist_api_key=TEST_API_KEY,
        todoist_api_base_url=TEST_BASE_URL,
        todoist_timeout=15000,
        todoist_retry_attempts=3,
        debug=False,
        _env_file=None,
    )


@pytest.fixture
def fake_api() -> FakeTodoistAPI:
    return FakeTodoistAPI()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rate_window(clock: FakeClock) -> RateWindow:
    return RateWindow(clock=clock)


@pytest.fixture
def api_client(
    settings: Settings, fake_api: FakeTodoistAPI, rate_window: RateWindow
) -> TodoistApiClient:
    """TodoistApiClient wired to the fake API. MockTransport needs no cleanup."""
    return TodoistApiClient(settings, transport=fake_api.transport(), rate_window=rate_window)


@pytest.fixture
def dispatcher(api_client: TodoistApiClient) -> ToolDispatcher:
    return ToolDispatcher(api_client)


@pytest.fixture
def sample_project() -> dict[str, Any]:
    return {
        "id": "2203306141",
        "name": "Shopping List",
        "comment_count": 0,
        "order": 1,
        "color": "charcoal",
        "shared": False,
        "favorite": False,
        "parent_id": None,
        "sync_id": 0,
        "url": "https://todoist.com/showProject?id=2203306141",
    }


@pytest.fixture
def sample_task() -> dict[str, Any]:
    return {
        "id": "2995104339",
        "project_id": "2203306141",
        "section_id": None,
        "parent_id": None,
        "content": "Buy Milk",
        "description": "",
        "completed": False,
        "priority": 1,
        "due": {"string": "tomorrow", "date": "2026-10-20", "recurring": False},
        "label_ids": [],
        "url": "https://todoist.com/showTask?id=2995104339",
    }
