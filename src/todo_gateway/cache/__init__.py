"""
todo_gateway.cache

Cache capability for the gateway read path.

Responsibilities:
- Define the cache store protocol and its Redis implementation.
- Derive per-caller cache keys from bearer credentials.
"""

from todo_gateway.cache.keys import UNKNOWN_PRINCIPAL, derive_principal_key, todos_cache_key
from todo_gateway.cache.store import CacheStore, RedisCacheStore, connect_cache_store

__all__ = [
    "UNKNOWN_PRINCIPAL",
    "CacheStore",
    "RedisCacheStore",
    "connect_cache_store",
    "derive_principal_key",
    "todos_cache_key",
]
