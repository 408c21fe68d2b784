"""
todo_gateway.backends.client

HTTP client boundary used by the gateway to call its upstream services.

Responsibilities:
- Hold one long-lived `httpx.AsyncClient` per named upstream.
- Forward method/path/body and the caller's Authorization header unchanged.
- Translate transport failures into `BackendError` subclasses.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from todo_gateway.errors import BackendTimeoutError, BackendUnavailableError
from todo_gateway.observability.logging import get_logger
from todo_gateway.settings import Settings

AUTH_SERVICE = "auth"
TODO_SERVICE = "todo"

DEFAULT_CONTENT_TYPE = "application/json"

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class BackendResponse:
    status_code: int
    body: bytes
    content_type: str = DEFAULT_CONTENT_TYPE

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class BackendClient:
    """
    Thin request/response forwarder. No retries: a failed upstream call is
    reported once and the caller decides what to surface.
    """

    def __init__(self, clients: Mapping[str, httpx.AsyncClient]) -> None:
        self._clients = dict(clients)

    @classmethod
    def from_settings(cls, settings: Settings) -> BackendClient:
        timeout = httpx.Timeout(settings.backend_timeout_seconds)
        return cls(
            {
                AUTH_SERVICE: httpx.AsyncClient(base_url=settings.auth_service_url, timeout=timeout),
                TODO_SERVICE: httpx.AsyncClient(base_url=settings.todo_service_url, timeout=timeout),
            }
        )

    async def forward(
        self,
        service: str,
        method: str,
        path: str,
        *,
        authorization: str | None = None,
        body: bytes | None = None,
    ) -> BackendResponse:
        client = self._clients[service]

        headers: dict[str, str] = {}
        if authorization:
            headers["Authorization"] = authorization
        if body is not None:
            headers["Content-Type"] = DEFAULT_CONTENT_TYPE

        try:
            r = await client.request(method, path, headers=headers, content=body)
        except httpx.TimeoutException as e:
            log.warning("backend_timeout", service=service, upstream_path=path, error=str(e))
            raise BackendTimeoutError(service=service, reason="upstream timed out") from e
        except httpx.TransportError as e:
            log.warning("backend_unreachable", service=service, upstream_path=path, error=str(e))
            raise BackendUnavailableError(service=service, reason="upstream unreachable") from e

        return BackendResponse(
            status_code=r.status_code,
            body=r.content,
            content_type=r.headers.get("content-type", DEFAULT_CONTENT_TYPE),
        )

    async def aclose(self) -> None:
        for client in self._clients.values():
            await client.aclose()


# --- Module Notes -----------------------------------------------------------
# Clients are built once in the app startup hook and shared by all requests;
# httpx.AsyncClient is safe for concurrent use and pools connections per upstream.
