"""
todo_gateway.api

API package for the gateway.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring and request models.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Handlers stay thin: validate, forward, and copy the upstream answer back.
