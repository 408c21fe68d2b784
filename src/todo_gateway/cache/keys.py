"""
todo_gateway.cache.keys

Cache key derivation.

Responsibilities:
- Slice a stable per-caller partition key out of a bearer credential.
- Build the cache key for the todo list read path.

The principal key is NOT an identity: the token is neither decoded nor
verified here, so it must never be used for access decisions. The todo
backend still authorizes every request that reaches it.
"""

from __future__ import annotations

BEARER_PREFIX = "Bearer "
UNKNOWN_PRINCIPAL = "unknown"
PRINCIPAL_KEY_LENGTH = 10


def derive_principal_key(authorization: str | None) -> str:
    """
    `Bearer aaa.bbbbbbbbbbbbbbbb.ccc` -> `bbbbbbbbbb` (first 10 chars of the
    payload segment). Missing header, fewer than two segments or an empty
    payload segment all map to `UNKNOWN_PRINCIPAL`. Never raises.
    """

    if not authorization:
        return UNKNOWN_PRINCIPAL

    token = authorization.removeprefix(BEARER_PREFIX)
    segments = token.split(".")
    if len(segments) < 2 or not segments[1]:
        return UNKNOWN_PRINCIPAL

    return segments[1][:PRINCIPAL_KEY_LENGTH]


def todos_cache_key(principal_key: str) -> str:
    return f"todos:user:{principal_key}"


# --- Module Notes -----------------------------------------------------------
# The prefix match is case-sensitive; a `bearer ` header keeps its prefix and
# is sliced as-is, which still yields a stable (if different) key.
