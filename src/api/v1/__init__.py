"""
API v1 package.

Contains versioned API routes for the federation discovery API and the
peer-facing federation endpoint.
"""

from src.api.v1.peer import router as peer_router
from src.api.v1.routes import router

__all__ = ["peer_router", "router"]
