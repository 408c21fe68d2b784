"""
todo_gateway.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) reporting the cache mode.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from todo_gateway.api.deps import cache_store
from todo_gateway.cache.store import CacheStore

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(store: CacheStore | None = Depends(cache_store)) -> dict[str, str]:
    # The gateway serves without a cache, so a missing store does not make it unready.
    return {"status": "ready", "cache": "redis" if store is not None else "disabled"}


# --- Module Notes -----------------------------------------------------------
# Kubernetes typically uses /healthz for liveness and /readyz for readiness gating.
