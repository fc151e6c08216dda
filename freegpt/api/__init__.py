"""FastAPI hosting for the chat panel.

Endpoints:
    - GET /health: Service health status
"""

from freegpt.api.app import create_app

__all__ = ["create_app"]
