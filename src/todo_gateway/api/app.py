"""
todo_gateway.api.app

FastAPI app factory for the gateway.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Create and dispose the process-scoped backend client and cache store.
- Map backend-layer failures to gateway error responses.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.status import HTTP_502_BAD_GATEWAY, HTTP_504_GATEWAY_TIMEOUT

from todo_gateway import __version__
from todo_gateway.api.routers.auth import router as auth_router
from todo_gateway.api.routers.health import router as health_router
from todo_gateway.api.routers.meta import router as meta_router
from todo_gateway.api.routers.todos import router as todos_router
from todo_gateway.backends.client import BackendClient
from todo_gateway.cache.store import connect_cache_store
from todo_gateway.errors import BackendError, BackendTimeoutError
from todo_gateway.observability.logging import configure_logging, get_logger
from todo_gateway.observability.middleware import RequestContextMiddleware
from todo_gateway.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        # One backend client and one cache connection attempt per process.
        app.state.backend = BackendClient.from_settings(settings)
        app.state.cache_store = await connect_cache_store(
            settings.redis_url,
            connect_timeout=settings.cache_connect_timeout_seconds,
            socket_timeout=settings.cache_socket_timeout_seconds,
        )
        try:
            yield
        finally:
            await app.state.backend.aclose()
            if app.state.cache_store is not None:
                await app.state.cache_store.close()
            log.info("shutdown")

    app = FastAPI(
        title="API Gateway",
        description="Gateway for TodoApp Microservices",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    app.include_router(meta_router)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(todos_router)

    @app.exception_handler(BackendError)
    async def _backend_error(_: Request, exc: BackendError) -> JSONResponse:
        status = HTTP_504_GATEWAY_TIMEOUT if isinstance(exc, BackendTimeoutError) else HTTP_502_BAD_GATEWAY
        return JSONResponse(
            status_code=status,
            content={"detail": exc.reason, "service": exc.service},
        )

    return app


# --- Module Notes -----------------------------------------------------------
# Tests that skip the lifespan put fakes on `app.state.backend` / `app.state.cache_store`.
