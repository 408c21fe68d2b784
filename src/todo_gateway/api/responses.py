"""
todo_gateway.api.responses

Helpers turning upstream answers into Starlette responses.
"""

from __future__ import annotations

from fastapi import Response

from todo_gateway.backends.client import BackendResponse


def passthrough(r: BackendResponse) -> Response:
    # Status, body and content-type are copied verbatim; no normalization.
    return Response(content=r.body, status_code=r.status_code, media_type=r.content_type)


# --- Module Notes -----------------------------------------------------------
# `GET /todos` builds its own response: it pins the content-type and adds `x-cache`.
