"""API routes package."""

from app.routes.docs import router as docs_router
from app.routes.health import router as health_router
from app.routes.secop import router as secop_router

__all__ = ["docs_router", "health_router", "secop_router"]
