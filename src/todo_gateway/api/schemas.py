"""
todo_gateway.api.schemas

Request models for the pass-through endpoints.

Responsibilities:
- Validate inbound bodies and document them in OpenAPI.

Bodies are forwarded to the backends byte-for-byte once they validate;
response bodies are never validated or reshaped.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RegisterRequest(_CamelModel):
    email: str
    password: str
    full_name: str = Field(alias="fullName")


class LoginRequest(_CamelModel):
    email: str
    password: str


class CreateTodoRequest(_CamelModel):
    title: str
    description: str | None = None
    is_completed: bool = Field(default=False, alias="isCompleted")


class UpdateTodoRequest(_CamelModel):
    id: int
    title: str
    description: str | None = None
    is_completed: bool = Field(default=False, alias="isCompleted")
