"""
tests.test_todos_cache

Unit tests for the cache-aside todo list reader.
"""

from __future__ import annotations

import httpx
import pytest

from conftest import TODOS_BODY, FakeCacheStore, RecordingUpstream
from todo_gateway.backends.client import BackendClient
from todo_gateway.errors import BackendUnavailableError
from todo_gateway.services.todos_cache import CachedTodosReader, CacheStatus

AUTH = "Bearer aaa.bbbbbbbbbbbbbbbbbbbb.ccc"
KEY = "todos:user:bbbbbbbbbb"


@pytest.mark.asyncio
async def test_miss_fetches_once_and_fills_cache(
    backend: BackendClient, store: FakeCacheStore, upstream: RecordingUpstream
) -> None:
    reader = CachedTodosReader(backend=backend, store=store)

    result = await reader.read(AUTH)

    assert result.cache_status is CacheStatus.miss
    assert result.status_code == 200
    assert result.body == TODOS_BODY
    assert result.content_type == "application/json"
    assert len(upstream.requests) == 1
    assert upstream.requests[0].url.path == "/api/todos"
    assert upstream.requests[0].headers["authorization"] == AUTH
    assert store.gets == [KEY]
    assert store.sets == [(KEY, TODOS_BODY, 300)]


@pytest.mark.asyncio
async def test_hit_skips_backend(
    backend: BackendClient, store: FakeCacheStore, upstream: RecordingUpstream
) -> None:
    store.data[KEY] = b'[{"id":42}]'
    reader = CachedTodosReader(backend=backend, store=store)

    result = await reader.read(AUTH)

    assert result.cache_status is CacheStatus.hit
    assert result.status_code == 200
    assert result.body == b'[{"id":42}]'
    assert result.content_type == "application/json"
    assert upstream.requests == []
    assert store.sets == []


@pytest.mark.asyncio
async def test_second_read_is_served_from_cache(
    backend: BackendClient, store: FakeCacheStore, upstream: RecordingUpstream
) -> None:
    reader = CachedTodosReader(backend=backend, store=store)

    first = await reader.read(AUTH)
    upstream.body = b"[]"  # would differ if the backend were consulted again
    second = await reader.read(AUTH)

    assert second.cache_status is CacheStatus.hit
    assert second.body == first.body == TODOS_BODY
    assert len(upstream.requests) == 1


@pytest.mark.asyncio
async def test_empty_cached_value_is_a_miss(
    backend: BackendClient, store: FakeCacheStore, upstream: RecordingUpstream
) -> None:
    store.data[KEY] = b""
    reader = CachedTodosReader(backend=backend, store=store)

    result = await reader.read(AUTH)

    assert result.cache_status is CacheStatus.miss
    assert len(upstream.requests) == 1


@pytest.mark.asyncio
async def test_absent_store_always_goes_to_backend(
    backend: BackendClient, upstream: RecordingUpstream
) -> None:
    reader = CachedTodosReader(backend=backend, store=None)

    for _ in range(3):
        result = await reader.read(AUTH)
        assert result.cache_status is CacheStatus.bypass
        assert result.body == TODOS_BODY

    assert len(upstream.requests) == 3


@pytest.mark.asyncio
async def test_store_read_failure_falls_back_to_backend(
    backend: BackendClient, store: FakeCacheStore, upstream: RecordingUpstream
) -> None:
    store.fail_get = True
    reader = CachedTodosReader(backend=backend, store=store)

    result = await reader.read(AUTH)

    assert result.cache_status is CacheStatus.miss
    assert result.status_code == 200
    assert result.body == TODOS_BODY
    assert len(upstream.requests) == 1
    # A failed read is a miss, so the fill is still attempted.
    assert store.sets == [(KEY, TODOS_BODY, 300)]


@pytest.mark.asyncio
async def test_store_write_failure_does_not_fail_request(
    backend: BackendClient, store: FakeCacheStore, upstream: RecordingUpstream
) -> None:
    store.fail_set = True
    reader = CachedTodosReader(backend=backend, store=store)

    result = await reader.read(AUTH)

    assert result.status_code == 200
    assert result.body == TODOS_BODY
    assert len(store.sets) == 1
    assert store.data == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 404, 500, 503])
async def test_non_success_responses_are_not_cached(
    backend: BackendClient, store: FakeCacheStore, upstream: RecordingUpstream, status_code: int
) -> None:
    upstream.status_code = status_code
    upstream.body = b'{"error":"nope"}'
    reader = CachedTodosReader(backend=backend, store=store)

    result = await reader.read(AUTH)
    again = await reader.read(AUTH)

    # Non-2xx is passed through with its own status and never turns into a 200 hit.
    assert result.status_code == again.status_code == status_code
    assert result.body == b'{"error":"nope"}'
    assert again.cache_status is CacheStatus.miss
    assert store.sets == []
    assert len(upstream.requests) == 2


@pytest.mark.asyncio
async def test_custom_ttl_is_used_for_fill(backend: BackendClient, store: FakeCacheStore) -> None:
    reader = CachedTodosReader(backend=backend, store=store, ttl_seconds=42)

    await reader.read(AUTH)

    assert store.sets[0][2] == 42


@pytest.mark.asyncio
async def test_anonymous_reads_share_sentinel_key(
    backend: BackendClient, store: FakeCacheStore, upstream: RecordingUpstream
) -> None:
    reader = CachedTodosReader(backend=backend, store=store)

    await reader.read(None)

    assert store.gets == ["todos:user:unknown"]
    assert "authorization" not in upstream.requests[0].headers


@pytest.mark.asyncio
async def test_backend_failure_propagates(
    backend: BackendClient, store: FakeCacheStore, upstream: RecordingUpstream
) -> None:
    upstream.error = httpx.ConnectError("connection refused")
    reader = CachedTodosReader(backend=backend, store=store)

    with pytest.raises(BackendUnavailableError):
        await reader.read(AUTH)

    assert store.sets == []
