"""
tests.conftest

Shared fixtures for the gateway test-suite.

Responsibilities:
- Provide a recording fake upstream (httpx.MockTransport) behind a real BackendClient.
- Provide an in-memory cache store that counts calls and can be told to fail.
"""

from __future__ import annotations

import httpx
import pytest

from todo_gateway.api.app import create_app
from todo_gateway.backends.client import AUTH_SERVICE, TODO_SERVICE, BackendClient
from todo_gateway.errors import CacheStoreError
from todo_gateway.settings import Settings

TODOS_BODY = b'[{"id":1,"title":"buy milk","isCompleted":false,"userId":7}]'


class RecordingUpstream:
    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = TODOS_BODY
        self.content_type = "application/json; charset=utf-8"
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code,
            content=self.body,
            headers={"content-type": self.content_type},
        )


class FakeCacheStore:
    def __init__(self) -> None:
        self.data: dict[str, bytes] = {}
        self.gets: list[str] = []
        self.sets: list[tuple[str, bytes, int]] = []
        self.fail_get = False
        self.fail_set = False

    async def get(self, key: str) -> bytes | None:
        self.gets.append(key)
        if self.fail_get:
            raise CacheStoreError("connection reset")
        return self.data.get(key)

    async def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        self.sets.append((key, value, ttl_seconds))
        if self.fail_set:
            raise CacheStoreError("connection reset")
        self.data[key] = value

    async def close(self) -> None:
        pass


@pytest.fixture
def upstream() -> RecordingUpstream:
    return RecordingUpstream()


@pytest.fixture
def backend(upstream: RecordingUpstream) -> BackendClient:
    transport = httpx.MockTransport(upstream)
    return BackendClient(
        {
            AUTH_SERVICE: httpx.AsyncClient(transport=transport, base_url="http://auth.test"),
            TODO_SERVICE: httpx.AsyncClient(transport=transport, base_url="http://todo.test"),
        }
    )


@pytest.fixture
def store() -> FakeCacheStore:
    return FakeCacheStore()


@pytest.fixture
def app(backend: BackendClient, store: FakeCacheStore):
    # Lifespan is not run under ASGITransport; inject the shared resources directly.
    app = create_app(settings=Settings(env="test"))
    app.state.backend = backend
    app.state.cache_store = store
    return app


def client_for(app) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test")
