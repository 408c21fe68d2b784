"""
todo_gateway.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request-scoped logging context middleware.
"""

# Package marker.
