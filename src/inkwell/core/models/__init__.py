"""
Database models for Inkwell.

This package contains SQLAlchemy ORM models that define the database schema
for the Inkwell notebook. All models are designed for async operations.

Models included:
    - User: User account management with username/password authentication
    - RefreshToken: JWT refresh token management
    - Folder: Folders notes can be filed into
    - Tag / NoteTag: Per-user tags and their note links
    - Note: Rich-text note with trash and lock state
    - NoteVersion: Earlier title/content snapshots of a note
    - Comment: Comments attached to a note
"""

from .base import BaseModel
from .comment import Comment
from .folder import Folder
from .note import Note
from .note_version import NoteVersion
from .refresh_token import RefreshToken
from .tag import NoteTag, Tag
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "RefreshToken",
    "Folder",
    "Tag",
    "NoteTag",
    "Note",
    "NoteVersion",
    "Comment",
]
