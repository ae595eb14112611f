from __future__ import annotations

import threading
import time

import httpx
import pytest
from fastapi.testclient import TestClient

from natural_events.core.config import Settings
from natural_events.main import create_app

EVENTS_BASE = "http://events.test/api/events"
CATEGORIES_URL = "http://eonet.test/api/v3/categories"

CATEGORIES_PAYLOAD = {
    "categories": [
        {"id": "seaLakeIce", "title": "Sea and Lake Ice"},
        {"id": "floods", "title": "Floods"},
        {"id": "wildfires", "title": "Wildfires"},
    ]
}


class FakeUpstream:
    """Routes requests from the shared httpx client to canned responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: dict[tuple[str, str], object] = {}
        self.categories_status = 200
        self.categories_gate: threading.Event | None = None

    def respond(self, method: str, path: str, status_code: int = 200, **kwargs) -> None:
        self.responses[(method, path)] = (status_code, kwargs)

    def fail(self, method: str, path: str) -> None:
        self.responses[(method, path)] = httpx.ConnectError("upstream down")

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if str(request.url) == CATEGORIES_URL:
            if self.categories_gate is not None:
                self.categories_gate.wait(timeout=5)
            return httpx.Response(self.categories_status, json=CATEGORIES_PAYLOAD)
        entry = self.responses.get((request.method, request.url.path))
        if entry is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(entry, Exception):
            raise httpx.ConnectError(str(entry), request=request)
        status_code, kwargs = entry
        return httpx.Response(status_code, **kwargs)


def wait_for_registry(app, timeout: float = 5.0) -> None:
    """Block until the background category fetch has succeeded or failed."""
    deadline = time.monotonic() + timeout
    while not app.state.category_registry.settled:
        if time.monotonic() > deadline:
            raise AssertionError("category registry never settled")
        time.sleep(0.01)


@pytest.fixture()
def settle_registry():
    return wait_for_registry


@pytest.fixture()
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        events_api_base_url=EVENTS_BASE,
        categories_url=CATEGORIES_URL,
    )


@pytest.fixture()
def client(upstream, settings):
    app = create_app(settings=settings, transport=httpx.MockTransport(upstream))
    with TestClient(app) as test_client:
        wait_for_registry(app)
        yield test_client
