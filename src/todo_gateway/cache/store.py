"""
todo_gateway.cache.store

Key/value cache store with expiring entries.

Responsibilities:
- Define the `CacheStore` protocol the read path depends on.
- Implement it on `redis.asyncio`, storing raw response bytes.
- Connect once at startup and report absence instead of failing.
"""

from __future__ import annotations

from typing import Protocol

import redis.asyncio as redis
from redis.exceptions import RedisError

from todo_gateway.errors import CacheStoreError
from todo_gateway.observability.logging import get_logger

log = get_logger(__name__)


class CacheStore(Protocol):
    async def get(self, key: str) -> bytes | None:
        """Return the stored bytes, or None. Raises CacheStoreError."""
        ...

    async def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        """Store value with a TTL in seconds. Raises CacheStoreError."""
        ...

    async def close(self) -> None: ...


class RedisCacheStore:
    def __init__(self, client: redis.Redis) -> None:
        self._redis = client

    async def get(self, key: str) -> bytes | None:
        try:
            return await self._redis.get(key)
        except RedisError as e:
            raise CacheStoreError(f"GET {key} failed: {e}") from e

    async def set(self, key: str, value: bytes, ttl_seconds: int) -> None:
        try:
            await self._redis.set(key, value, ex=ttl_seconds)
        except RedisError as e:
            raise CacheStoreError(f"SET {key} failed: {e}") from e

    async def ping(self) -> None:
        try:
            await self._redis.ping()
        except (RedisError, OSError) as e:
            raise CacheStoreError(f"PING failed: {e}") from e

    async def close(self) -> None:
        await self._redis.aclose()


def normalize_redis_url(url: str) -> str:
    # Accept bare `host:port` connection strings as well as full URLs.
    if "://" in url:
        return url
    return f"redis://{url}/0"


async def connect_cache_store(
    url: str,
    *,
    connect_timeout: float = 2.0,
    socket_timeout: float = 2.0,
) -> RedisCacheStore | None:
    """
    Single startup connection attempt. Returns None when Redis is not
    reachable; callers keep that answer for the life of the process.
    """

    try:
        client = redis.from_url(
            normalize_redis_url(url),
            socket_connect_timeout=connect_timeout,
            socket_timeout=socket_timeout,
            health_check_interval=30,
        )
    except ValueError as e:
        log.warning("cache_store_unavailable", reason="invalid url", error=str(e))
        return None

    store = RedisCacheStore(client)
    try:
        await store.ping()
    except CacheStoreError as e:
        log.warning("cache_store_unavailable", reason="ping failed", error=str(e))
        await store.close()
        return None

    log.info("cache_store_connected")
    return store


# --- Module Notes -----------------------------------------------------------
# decode_responses stays off: cached values are the upstream body bytes, returned verbatim.
