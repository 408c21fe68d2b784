"""
todo_gateway.backends

Upstream service clients.

Responsibilities:
- Forward requests to the named backends (auth, todo) and return their raw responses.
"""

from todo_gateway.backends.client import (
    AUTH_SERVICE,
    TODO_SERVICE,
    BackendClient,
    BackendResponse,
)

__all__ = ["AUTH_SERVICE", "TODO_SERVICE", "BackendClient", "BackendResponse"]


# --- Module Notes -----------------------------------------------------------
# Route handlers and the cached read path depend on this boundary, not on httpx.
