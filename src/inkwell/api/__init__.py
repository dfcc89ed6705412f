"""API routers for Inkwell."""

from .auth import router as auth_router
from .comments import router as comments_router
from .folders import router as folders_router
from .health import router as health_router
from .locks import router as locks_router
from .notes import router as notes_router
from .tags import router as tags_router
from .uploads import router as uploads_router

__all__ = [
    "auth_router",
    "folders_router",
    "tags_router",
    "notes_router",
    "locks_router",
    "comments_router",
    "uploads_router",
    "health_router",
]
