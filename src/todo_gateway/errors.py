"""
todo_gateway.errors

Gateway exception types.

Responsibilities:
- Separate backend-layer failures (surfaced to callers) from cache-layer
  failures (always absorbed).
"""

from __future__ import annotations

from dataclasses import dataclass


class GatewayError(Exception):
    pass


@dataclass(eq=False, slots=True)
class BackendError(GatewayError):
    """
    An upstream could not produce a response at all.
    A response with a 4xx/5xx status is not a BackendError; it is passed through.
    """

    service: str
    reason: str

    def __str__(self) -> str:
        return f"{self.service}: {self.reason}"


class BackendUnavailableError(BackendError):
    pass


class BackendTimeoutError(BackendError):
    pass


class CacheStoreError(GatewayError):
    pass


# --- Module Notes -----------------------------------------------------------
# HTTP mapping lives in `api.app`: unavailable -> 502, timeout -> 504.
