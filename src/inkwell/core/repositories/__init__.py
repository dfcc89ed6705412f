"""Repository layer for data access."""

from .comment_repository import CommentRepository
from .folder_repository import FolderRepository
from .note_repository import NoteRepository
from .refresh_token_repository import RefreshTokenRepository
from .tag_repository import TagRepository
from .user_repository import UserRepository
from .version_repository import VersionRepository

__all__ = [
    "UserRepository",
    "RefreshTokenRepository",
    "FolderRepository",
    "TagRepository",
    "NoteRepository",
    "VersionRepository",
    "CommentRepository",
]
