"""
Service layer: business rules between the API routers and the repositories.
"""

from .interfaces import (
    IAuthService,
    ICommentService,
    IFolderService,
    IHealthService,
    ILockService,
    INoteService,
    IStatsService,
    ITagService,
    IUploadService,
)

from .auth_service import AuthService
from .comment_service import CommentService
from .folder_service import FolderService
from .health_service import HealthService
from .lock_service import LockService
from .note_service import NoteService
from .stats_service import StatsService
from .tag_service import TagService
from .upload_service import UploadService

__all__ = [
    # Interfaces
    "IAuthService",
    "IFolderService",
    "ITagService",
    "INoteService",
    "ILockService",
    "ICommentService",
    "IStatsService",
    "IUploadService",
    "IHealthService",
    # Implementations
    "AuthService",
    "FolderService",
    "TagService",
    "NoteService",
    "LockService",
    "CommentService",
    "StatsService",
    "UploadService",
    "HealthService",
]
