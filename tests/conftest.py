"""Shared test fixtures."""

import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from obot_relay.app import app
from obot_relay.config import get_settings
from obot_relay.slack.router import get_forwarder
from obot_relay.task.client import TaskForwarder

TEST_ACCESS_TOKEN = "test-obot-token"
TEST_TASK_API_URL = "https://obot.test/api/invoke/relay-task"


class BrokenBodyStream(httpx.AsyncByteStream):
    """Response body whose connection drops before any bytes arrive."""

    async def __aiter__(self):
        raise httpx.ReadError("connection reset while reading body")
        yield b""  # pragma: no cover


class FakeTaskAPI:
    """Records requests sent to the task API and returns a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = b'{"status":"accepted"}'
        self.error: Exception | None = None
        self.broken_body = False
        self._forwarders: list[TaskForwarder] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.broken_body:
            return httpx.Response(self.status_code, stream=BrokenBodyStream())
        return httpx.Response(self.status_code, content=self.body)

    def forwarder(self, url: str = TEST_TASK_API_URL) -> TaskForwarder:
        client = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        forwarder = TaskForwarder(client, url, TEST_ACCESS_TOKEN)
        self._forwarders.append(forwarder)
        return forwarder

    def close(self) -> None:
        for forwarder in self._forwarders:
            asyncio.run(forwarder.aclose())


@pytest.fixture(autouse=True)
def relay_env(monkeypatch: pytest.MonkeyPatch):
    """Provide the required environment and a fresh settings cache per test."""
    monkeypatch.setenv("OBOT_ACCESS_TOKEN", TEST_ACCESS_TOKEN)
    monkeypatch.setenv("TASK_API_URL", TEST_TASK_API_URL)
    for name in ("SLACK_SIGNING_SECRET", "TASK_API_TIMEOUT", "HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def task_api():
    """Fake downstream task API; its clients are closed after the test."""
    fake = FakeTaskAPI()
    yield fake
    fake.close()


@pytest.fixture
def client(task_api: FakeTaskAPI):
    """TestClient with lifespan running and the task API replaced by a fake."""
    forwarder = task_api.forwarder()
    app.dependency_overrides[get_forwarder] = lambda: forwarder
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
