"""FastAPI host for the chat UI.

Endpoints:
    - GET /health: Service health status
"""

from novicegpt.api.app import create_app

__all__ = ["create_app"]
