"""API routes package.

- health: Health check endpoint
- documents: Guest declaration generation

All routers are registered in main.py with /api prefix.
"""

from api.routes.documents import router as documents_router
from api.routes.health import router as health_router

__all__ = [
    "documents_router",
    "health_router",
]
