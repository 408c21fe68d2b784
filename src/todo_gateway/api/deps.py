"""
todo_gateway.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose the process-scoped singletons kept on `app.state`.
- Extract the caller's Authorization header for forwarding.
"""

from __future__ import annotations

from fastapi import Depends, Request, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from todo_gateway.backends.client import BackendClient
from todo_gateway.cache.store import CacheStore
from todo_gateway.services.todos_cache import CachedTodosReader
from todo_gateway.settings import Settings

# Registers the bearer scheme in the OpenAPI docs; the gateway itself never validates tokens.
_bearer = HTTPBearer(
    auto_error=False,
    description="JWT Authorization header. Get token from /auth/login first.",
)


def settings_dep(request: Request) -> Settings:
    return request.app.state.settings  # type: ignore[attr-defined]


def backend_client(request: Request) -> BackendClient:
    # Built once in the app lifespan (see `todo_gateway.api.app.create_app`).
    return request.app.state.backend  # type: ignore[attr-defined]


def cache_store(request: Request) -> CacheStore | None:
    # None means Redis was unreachable at startup; that holds until restart.
    return getattr(request.app.state, "cache_store", None)


def forwarded_authorization(
    request: Request,
    _: HTTPAuthorizationCredentials | None = Security(_bearer),
) -> str | None:
    # Forward the raw header value, not the parsed credentials.
    return request.headers.get("authorization")


def todos_reader(
    backend: BackendClient = Depends(backend_client),
    store: CacheStore | None = Depends(cache_store),
    settings: Settings = Depends(settings_dep),
) -> CachedTodosReader:
    return CachedTodosReader(
        backend=backend,
        store=store,
        ttl_seconds=settings.todos_cache_ttl_seconds,
    )


# --- Module Notes -----------------------------------------------------------
# The reader is stateless and cheap; only the backend client and the store are shared.
