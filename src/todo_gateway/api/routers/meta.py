"""
todo_gateway.api.routers.meta

Service descriptor endpoint.

Responsibilities:
- Describe the gateway, its configured backends and its public routes at `/`.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from todo_gateway import __version__
from todo_gateway.api.deps import settings_dep
from todo_gateway.settings import Settings

router = APIRouter(tags=["meta"])

ENDPOINTS = [
    "POST /auth/register - Register new user",
    "POST /auth/login - Login and get JWT token",
    "GET /todos - Get user todos (requires auth)",
    "GET /todos/{id} - Get a single todo (requires auth)",
    "POST /todos - Create todo (requires auth)",
    "PUT /todos/{id} - Update todo (requires auth)",
    "DELETE /todos/{id} - Delete todo (requires auth)",
]


@router.get("/")
async def describe(settings: Settings = Depends(settings_dep)) -> dict[str, Any]:
    return {
        "service": "API Gateway",
        "version": __version__,
        "description": "Gateway for TodoApp microservices",
        "backends": {
            "authService": settings.auth_service_url,
            "todoService": settings.todo_service_url,
        },
        "endpoints": ENDPOINTS,
    }


# --- Module Notes -----------------------------------------------------------
# Backend URLs come from settings so the descriptor matches the running config.
