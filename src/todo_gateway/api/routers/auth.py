"""
todo_gateway.api.routers.auth

Pass-through endpoints for the auth service.

Responsibilities:
- Forward registration and login bodies to the auth backend.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from todo_gateway.api.deps import backend_client
from todo_gateway.api.responses import passthrough
from todo_gateway.api.schemas import LoginRequest, RegisterRequest
from todo_gateway.backends.client import AUTH_SERVICE, BackendClient

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", name="Register")
async def register(
    request: Request,
    body: RegisterRequest,
    backend: BackendClient = Depends(backend_client),
) -> Response:
    r = await backend.forward(AUTH_SERVICE, "POST", "/auth/register", body=await request.body())
    return passthrough(r)


@router.post("/login", name="Login")
async def login(
    request: Request,
    body: LoginRequest,
    backend: BackendClient = Depends(backend_client),
) -> Response:
    r = await backend.forward(AUTH_SERVICE, "POST", "/auth/login", body=await request.body())
    return passthrough(r)


# --- Module Notes -----------------------------------------------------------
# No Authorization header is forwarded here; both endpoints are anonymous upstream.
