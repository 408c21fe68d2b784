"""
todo_gateway.api.routers

Route modules for the gateway.
"""

# Package marker.
