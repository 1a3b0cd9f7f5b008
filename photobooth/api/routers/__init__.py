"""API routers."""

from .health import router as health_router
from .photos import router as photos_router
from .sessions import router as sessions_router
from .uploads import router as uploads_router
from .users import router as users_router

__all__ = [
    "health_router",
    "photos_router",
    "sessions_router",
    "uploads_router",
    "users_router",
]
