"""
Pydantic schemas for validating and documenting API requests and responses.

This package exposes the Pydantic models used across the application to
define input/output contracts for authentication, notes, folders, tags,
comments, uploads and common responses.
"""

from .auth import (
    LoginRequest,
    PasswordChangeRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from .comments import CommentCreate, CommentResponse
from .common import HealthCheckResponse, MessageResponse, PaginationResponse
from .folders import FolderCreate, FolderResponse, FolderUpdate
from .notes import (
    NoteCreate,
    NoteListItem,
    NoteListResponse,
    NotePasswordRequest,
    NoteResponse,
    NoteTagsUpdate,
    NoteUpdate,
    NoteVersionResponse,
    StatsResponse,
    TrashEmptyResponse,
)
from .tags import TagCreate, TagResponse, TagSummary, TagUpdate
from .uploads import UploadResponse

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "RefreshTokenRequest",
    "PasswordChangeRequest",
    "TokenResponse",
    "UserResponse",
    # Folder / tag schemas
    "FolderCreate",
    "FolderUpdate",
    "FolderResponse",
    "TagCreate",
    "TagUpdate",
    "TagSummary",
    "TagResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteTagsUpdate",
    "NoteResponse",
    "NoteListItem",
    "NoteListResponse",
    "NoteVersionResponse",
    "NotePasswordRequest",
    "TrashEmptyResponse",
    "StatsResponse",
    # Comments / uploads
    "CommentCreate",
    "CommentResponse",
    "UploadResponse",
    # Common schemas
    "PaginationResponse",
    "MessageResponse",
    "HealthCheckResponse",
]
