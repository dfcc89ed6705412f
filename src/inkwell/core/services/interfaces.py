"""
Service interfaces for the Inkwell application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union
from uuid import UUID

from fastapi import UploadFile

from ..schemas.auth import (
    LoginRequest,
    PasswordChangeRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from ..schemas.comments import CommentCreate, CommentResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.folders import FolderCreate, FolderResponse, FolderUpdate
from ..schemas.notes import (
    NoteCreate,
    NoteListItem,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
    NoteVersionResponse,
    StatsResponse,
)
from ..schemas.tags import TagCreate, TagResponse, TagUpdate
from ..schemas.uploads import UploadResponse


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> TokenResponse:
        """Register new user and log them in."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return JWT tokens."""
        pass

    @abstractmethod
    async def refresh_token(self, request: RefreshTokenRequest) -> TokenResponse:
        """Rotate the refresh token and issue a new access token."""
        pass

    @abstractmethod
    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        pass

    @abstractmethod
    async def change_password(self, user_id: UUID, request: PasswordChangeRequest) -> bool:
        """Change user password."""
        pass

    @abstractmethod
    async def logout_user(self, user_id: UUID, access_token: str) -> bool:
        """Logout user."""
        pass


class IFolderService(ABC):
    """Folder management."""

    @abstractmethod
    async def list_folders(self, user_id: UUID) -> List[FolderResponse]:
        pass

    @abstractmethod
    async def create_folder(self, user_id: UUID, request: FolderCreate) -> FolderResponse:
        pass

    @abstractmethod
    async def update_folder(
        self, folder_id: UUID, user_id: UUID, request: FolderUpdate
    ) -> FolderResponse:
        pass

    @abstractmethod
    async def delete_folder(self, folder_id: UUID, user_id: UUID) -> None:
        """Delete folder, uncategorizing its notes."""
        pass


class ITagService(ABC):
    """Tag management."""

    @abstractmethod
    async def list_tags(self, user_id: UUID) -> List[TagResponse]:
        pass

    @abstractmethod
    async def create_tag(self, user_id: UUID, request: TagCreate) -> TagResponse:
        pass

    @abstractmethod
    async def update_tag(self, tag_id: UUID, user_id: UUID, request: TagUpdate) -> TagResponse:
        pass

    @abstractmethod
    async def delete_tag(self, tag_id: UUID, user_id: UUID) -> None:
        pass


class INoteService(ABC):
    """Note service for CRUD, trash and version history."""

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update existing note, snapshotting the previous state."""
        pass

    @abstractmethod
    async def set_note_tags(self, note_id: UUID, user_id: UUID, tag_ids: List[UUID]) -> NoteResponse:
        """Replace the tag set of a note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        """Move note to the trash."""
        pass

    @abstractmethod
    async def restore_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Take note out of the trash."""
        pass

    @abstractmethod
    async def delete_note_permanently(self, note_id: UUID, user_id: UUID) -> None:
        pass

    @abstractmethod
    async def list_user_notes(
        self,
        user_id: UUID,
        page: int = 1,
        per_page: int = 50,
        folder_id: Optional[UUID] = None,
        uncategorized: bool = False,
        tag_id: Optional[UUID] = None,
        query: Optional[str] = None,
    ) -> NoteListResponse:
        """List user notes with pagination."""
        pass

    @abstractmethod
    async def list_trash(self, user_id: UUID, page: int = 1, per_page: int = 50) -> NoteListResponse:
        pass

    @abstractmethod
    async def empty_trash(self, user_id: UUID) -> int:
        pass

    @abstractmethod
    async def list_versions(self, note_id: UUID, user_id: UUID) -> List[NoteVersionResponse]:
        pass

    @abstractmethod
    async def restore_version(
        self, note_id: UUID, version_id: UUID, user_id: UUID
    ) -> NoteResponse:
        pass


class ILockService(ABC):
    """Per-note password locks."""

    @abstractmethod
    async def lock_note(self, note_id: UUID, user_id: UUID, password: str) -> NoteResponse:
        pass

    @abstractmethod
    async def unlock_note(self, note_id: UUID, user_id: UUID, password: str) -> NoteResponse:
        pass

    @abstractmethod
    async def remove_lock(self, note_id: UUID, user_id: UUID, password: str) -> NoteResponse:
        pass


class ICommentService(ABC):
    """Comments on notes."""

    @abstractmethod
    async def list_comments(self, note_id: UUID, user_id: UUID) -> List[CommentResponse]:
        pass

    @abstractmethod
    async def add_comment(
        self, note_id: UUID, user_id: UUID, request: CommentCreate
    ) -> CommentResponse:
        pass

    @abstractmethod
    async def delete_comment(self, comment_id: UUID, user_id: UUID) -> None:
        pass


class IStatsService(ABC):
    """Writing statistics and note resurfacing."""

    @abstractmethod
    async def get_stats(self, user_id: UUID) -> StatsResponse:
        pass

    @abstractmethod
    async def resurface(
        self, user_id: UUID, mode: str = "random"
    ) -> Union[Optional[NoteResponse], List[NoteListItem]]:
        """One random note, or the notes written on this day in earlier years."""
        pass


class IUploadService(ABC):
    """Media upload for the editor."""

    @abstractmethod
    async def save_upload(self, user_id: UUID, file: UploadFile) -> UploadResponse:
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        pass
