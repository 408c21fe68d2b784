"""
todo_gateway.api.routers.todos

Todo endpoints.

Responsibilities:
- Serve `GET /todos` through the cache-aside reader.
- Forward the remaining todo operations to the todo backend unchanged.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from todo_gateway.api.deps import backend_client, forwarded_authorization, todos_reader
from todo_gateway.api.responses import passthrough
from todo_gateway.api.schemas import CreateTodoRequest, UpdateTodoRequest
from todo_gateway.backends.client import TODO_SERVICE, BackendClient
from todo_gateway.services.todos_cache import CachedTodosReader

router = APIRouter(prefix="/todos", tags=["todos"])


@router.get("", name="GetTodos")
async def get_todos(
    authorization: str | None = Depends(forwarded_authorization),
    reader: CachedTodosReader = Depends(todos_reader),
) -> Response:
    result = await reader.read(authorization)
    return Response(
        content=result.body,
        status_code=result.status_code,
        media_type=result.content_type,
        headers={"x-cache": result.cache_status.value},
    )


@router.get("/{todo_id}", name="GetTodoById")
async def get_todo(
    todo_id: int,
    authorization: str | None = Depends(forwarded_authorization),
    backend: BackendClient = Depends(backend_client),
) -> Response:
    r = await backend.forward(
        TODO_SERVICE, "GET", f"/api/todos/{todo_id}", authorization=authorization
    )
    return passthrough(r)


@router.post("", name="CreateTodo")
async def create_todo(
    request: Request,
    body: CreateTodoRequest,
    authorization: str | None = Depends(forwarded_authorization),
    backend: BackendClient = Depends(backend_client),
) -> Response:
    # Does not touch the cached list; see services.todos_cache notes.
    r = await backend.forward(
        TODO_SERVICE,
        "POST",
        "/api/todos",
        authorization=authorization,
        body=await request.body(),
    )
    return passthrough(r)


@router.put("/{todo_id}", name="UpdateTodo")
async def update_todo(
    todo_id: int,
    request: Request,
    body: UpdateTodoRequest,
    authorization: str | None = Depends(forwarded_authorization),
    backend: BackendClient = Depends(backend_client),
) -> Response:
    r = await backend.forward(
        TODO_SERVICE,
        "PUT",
        f"/api/todos/{todo_id}",
        authorization=authorization,
        body=await request.body(),
    )
    return passthrough(r)


@router.delete("/{todo_id}", name="DeleteTodo")
async def delete_todo(
    todo_id: int,
    authorization: str | None = Depends(forwarded_authorization),
    backend: BackendClient = Depends(backend_client),
) -> Response:
    r = await backend.forward(
        TODO_SERVICE, "DELETE", f"/api/todos/{todo_id}", authorization=authorization
    )
    return passthrough(r)


# --- Module Notes -----------------------------------------------------------
# Mutations leave `todos:user:*` entries alone; they expire by TTL only.
