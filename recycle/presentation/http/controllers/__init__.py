"""HTTP Controllers."""

from recycle.presentation.http.controllers.classify import router as classify_router
from recycle.presentation.http.controllers.health import router as health_router

__all__ = ["classify_router", "health_router"]
