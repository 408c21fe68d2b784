"""
todo_gateway.observability.logging

Structured logging for the gateway.

Responsibilities:
- Render every event as one JSON line on stdout via `structlog`.
- Stamp events with the service name.
- Keep bearer credentials out of the logs: the gateway handles raw tokens on
  every todo request, so any `authorization` field is masked before rendering.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

REDACTED = "[REDACTED]"
_SENSITIVE_KEYS = frozenset({"authorization", "proxy-authorization", "proxy_authorization"})


def redact_credentials(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for key in list(event_dict):
        if key.lower() in _SENSITIVE_KEYS and event_dict[key] is not None:
            event_dict[key] = REDACTED
    headers = event_dict.get("headers")
    if isinstance(headers, dict):
        event_dict["headers"] = {
            k: (REDACTED if k.lower() in _SENSITIVE_KEYS else v) for k, v in headers.items()
        }
    return event_dict


def _add_service_name(service_name: str) -> Processor:
    def processor(_: Any, __: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor


def build_processors(service_name: str) -> list[Processor]:
    # Redaction runs right before rendering so contextvars and bound values are covered too.
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_service_name(service_name),
        structlog.processors.dict_tracebacks,
        redact_credentials,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(*, service_name: str, level: str) -> None:
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )
    structlog.configure(
        processors=build_processors(service_name),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Core events log the derived principal key, never the token it came from.
