"""
todo_gateway.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the gateway.
- Hold upstream base URLs, timeouts and cache parameters.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Every field can be overridden with a `GATEWAY_`-prefixed env var,
    e.g. `GATEWAY_TODO_SERVICE_URL=http://todo:8080`.
    """

    model_config = SettingsConfigDict(env_prefix="GATEWAY_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "todo-gateway"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Upstreams
    auth_service_url: str = "http://localhost:5184"
    todo_service_url: str = "http://localhost:5289"
    backend_timeout_seconds: float = Field(default=30.0, gt=0)

    # Cache. Either `host:port` or a full redis:// URL.
    redis_url: str = Field(default="localhost:6379", repr=False)
    cache_connect_timeout_seconds: float = Field(default=2.0, gt=0)
    cache_socket_timeout_seconds: float = Field(default=2.0, gt=0)
    todos_cache_ttl_seconds: int = Field(default=300, ge=1)

    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars on every call.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Settings are read once at process start; the app factory stores the instance
# on `app.state.settings` so tests can inject their own.
