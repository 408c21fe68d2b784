"""
todo_gateway.services

Gateway service layer.

Responsibilities:
- Read-path policies that sit between route handlers and the backend client.
"""

# Package marker.
