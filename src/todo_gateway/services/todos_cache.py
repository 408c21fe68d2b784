"""
todo_gateway.services.todos_cache

Cache-aside read path for the caller's todo list.

Responsibilities:
- Look up the caller's cached list (keyed by the unverified principal key).
- On miss, fetch from the todo backend and fill the cache on 2xx responses.
- Bypass caching entirely when no cache store was connected at startup.
- Absorb every cache-layer failure; only backend failures reach the caller.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from todo_gateway.backends.client import TODO_SERVICE, BackendClient, BackendResponse
from todo_gateway.cache.keys import derive_principal_key, todos_cache_key
from todo_gateway.cache.store import CacheStore
from todo_gateway.errors import CacheStoreError
from todo_gateway.observability.logging import get_logger

TODOS_UPSTREAM_PATH = "/api/todos"
JSON_CONTENT_TYPE = "application/json"

log = get_logger(__name__)


class CacheStatus(enum.StrEnum):
    hit = "HIT"
    miss = "MISS"
    bypass = "BYPASS"


@dataclass(frozen=True, slots=True)
class TodosReadResult:
    status_code: int
    body: bytes
    cache_status: CacheStatus
    content_type: str = JSON_CONTENT_TYPE


class CachedTodosReader:
    """
    `store` is None when Redis was unreachable at startup. That is a mode,
    not an error: the reader then forwards every call straight to the backend.

    Hits are always answered with 200. Only 2xx backend responses are ever
    written, so a cached entry never stands in for a failed fetch.
    """

    def __init__(
        self,
        *,
        backend: BackendClient,
        store: CacheStore | None,
        ttl_seconds: int = 300,
    ) -> None:
        self._backend = backend
        self._store = store
        self._ttl_seconds = ttl_seconds

    async def read(self, authorization: str | None) -> TodosReadResult:
        principal_key = derive_principal_key(authorization)

        if self._store is None:
            log.debug("todos_cache_bypassed", principal_key=principal_key)
            r = await self._fetch(authorization)
            return TodosReadResult(status_code=r.status_code, body=r.body, cache_status=CacheStatus.bypass)

        key = todos_cache_key(principal_key)
        cached = await self._safe_get(self._store, key)
        if cached:
            log.info("todos_cache_hit", principal_key=principal_key)
            return TodosReadResult(status_code=200, body=cached, cache_status=CacheStatus.hit)

        log.info("todos_cache_miss", principal_key=principal_key)
        r = await self._fetch(authorization)
        if r.is_success:
            await self._safe_set(self._store, key, r.body)
        return TodosReadResult(status_code=r.status_code, body=r.body, cache_status=CacheStatus.miss)

    async def _fetch(self, authorization: str | None) -> BackendResponse:
        # BackendError propagates to the API layer.
        return await self._backend.forward(
            TODO_SERVICE,
            "GET",
            TODOS_UPSTREAM_PATH,
            authorization=authorization,
        )

    async def _safe_get(self, store: CacheStore, key: str) -> bytes | None:
        try:
            return await store.get(key)
        except CacheStoreError as e:
            log.warning("todos_cache_read_failed", cache_key=key, error=str(e))
            return None

    async def _safe_set(self, store: CacheStore, key: str, body: bytes) -> None:
        try:
            await store.set(key, body, self._ttl_seconds)
        except CacheStoreError as e:
            log.warning("todos_cache_write_failed", cache_key=key, error=str(e))


# --- Module Notes -----------------------------------------------------------
# Concurrent misses for the same key may both fetch and both write; the last
# write wins. Entries are copies of backend truth, so the race is harmless.
# Writes through POST/PUT/DELETE /todos do not invalidate entries: a caller can
# see a stale list for up to `ttl_seconds` after a mutation.
