"""Note service implementation."""

from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..logging import get_logger
from ..models.note import Note
from ..redis_client import get_redis_client
from ..repositories.folder_repository import FolderRepository
from ..repositories.note_repository import NoteRepository
from ..repositories.tag_repository import TagRepository
from ..repositories.version_repository import VersionRepository
from ..schemas.notes import (
    NoteCreate,
    NoteListItem,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
    NoteVersionResponse,
)
from ..schemas.tags import TagSummary
from .interfaces import INoteService

logger = get_logger("services.notes")

PREVIEW_LENGTH = 200


def note_to_response(note: Note, reveal: bool = False) -> NoteResponse:
    """Convert note model to response; a locked body stays hidden unless revealed."""
    hidden = note.is_locked and not reveal
    return NoteResponse(
        id=note.id,
        title=note.title,
        content="" if hidden else note.content,
        pinned=note.pinned,
        folder_id=note.folder_id,
        tags=[TagSummary.model_validate(tag) for tag in note.tags],
        locked=note.is_locked,
        char_count=0 if hidden else note.char_count,
        created_at=note.created_at,
        updated_at=note.updated_at,
        deleted_at=note.deleted_at,
    )


def note_to_list_item(note: Note) -> NoteListItem:
    """Convert note model to list item response."""
    locked = note.is_locked
    return NoteListItem(
        id=note.id,
        title=note.title,
        content_preview="" if locked else note.preview(PREVIEW_LENGTH),
        pinned=note.pinned,
        folder_id=note.folder_id,
        tags=[TagSummary.model_validate(tag) for tag in note.tags],
        locked=locked,
        char_count=0 if locked else note.char_count,
        created_at=note.created_at,
        updated_at=note.updated_at,
        deleted_at=note.deleted_at,
    )


def note_not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Note not found")


class NoteService(INoteService):
    """Note service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)
        self.folder_repo = FolderRepository(session)
        self.tag_repo = TagRepository(session)
        self.version_repo = VersionRepository(session)
        self.redis = get_redis_client()
        self.settings = get_settings()

    async def _get_owned_note(self, note_id: UUID, user_id: UUID) -> Note:
        note = await self.note_repo.get_by_id_and_user(note_id, user_id)
        if not note:
            raise note_not_found()
        return note

    async def _check_folder(self, folder_id: Optional[UUID], user_id: UUID) -> None:
        if folder_id is None:
            return
        if not await self.folder_repo.get_by_id_and_user(folder_id, user_id):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown folder")

    @staticmethod
    def _reject_locked(note: Note) -> None:
        if note.is_locked:
            raise HTTPException(status_code=status.HTTP_423_LOCKED, detail="Note is locked")

    def _page_size(self, per_page: int) -> int:
        if per_page < 1:
            return self.settings.default_page_size
        return min(per_page, self.settings.max_page_size)

    async def _snapshot_and_apply(self, note: Note, update_data: dict) -> Note:
        """Save the current title and content as a version, then write the update."""
        self.version_repo.add_version(note.id, note.title, note.content)
        updated = await self.note_repo.update_note(note, update_data)
        pruned = await self.version_repo.prune(note.id, self.settings.max_versions_per_note)
        if pruned:
            logger.debug(f"Pruned {pruned} old versions of note {note.id}")
        return updated

    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        await self._check_folder(request.folder_id, user_id)

        note = await self.note_repo.create_note(
            {
                "title": request.title,
                "content": request.content,
                "folder_id": request.folder_id,
                "user_id": user_id,
            }
        )
        await self.redis.invalidate_stats(user_id)
        logger.info(f"Created note {note.id} for user {user_id}")
        return note_to_response(note)

    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Get note by ID."""
        note = await self._get_owned_note(note_id, user_id)
        return note_to_response(note)

    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update existing note, snapshotting the previous state."""
        note = await self._get_owned_note(note_id, user_id)

        update_data = request.changes()
        if "folder_id" in update_data:
            await self._check_folder(update_data["folder_id"], user_id)

        if not update_data:
            return note_to_response(note)

        text_changed = any(
            key in update_data and update_data[key] != getattr(note, key)
            for key in ("title", "content")
        )

        if text_changed:
            updated = await self._snapshot_and_apply(note, update_data)
        else:
            updated = await self.note_repo.update_note(note, update_data)

        await self.redis.invalidate_stats(user_id)
        return note_to_response(updated)

    async def set_note_tags(self, note_id: UUID, user_id: UUID, tag_ids: List[UUID]) -> NoteResponse:
        """Replace the tag set of a note."""
        note = await self._get_owned_note(note_id, user_id)

        wanted = set(tag_ids)
        tags = await self.tag_repo.get_many_for_user(list(wanted), user_id)
        if len(tags) != len(wanted):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Unknown tag")

        updated = await self.note_repo.set_tags(note, tags)
        return note_to_response(updated)

    async def delete_note(self, note_id: UUID, user_id: UUID) -> None:
        """Move note to the trash."""
        note = await self._get_owned_note(note_id, user_id)
        if not note.is_deleted:
            note.soft_delete()
            await self.note_repo.save(note)
            await self.redis.invalidate_stats(user_id)

    async def restore_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Take note out of the trash."""
        note = await self._get_owned_note(note_id, user_id)
        if note.is_deleted:
            note.restore()
            note = await self.note_repo.save(note)
            await self.redis.invalidate_stats(user_id)
        return note_to_response(note)

    async def delete_note_permanently(self, note_id: UUID, user_id: UUID) -> None:
        note = await self._get_owned_note(note_id, user_id)
        await self.note_repo.delete_note(note)
        await self.redis.invalidate_stats(user_id)
        logger.info(f"Permanently deleted note {note_id}")

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
        page = max(page, 1)
        per_page = self._page_size(per_page)

        notes, total_count = await self.note_repo.list_user_notes(
            user_id,
            page=page,
            per_page=per_page,
            folder_id=folder_id,
            uncategorized=uncategorized,
            tag_id=tag_id,
            query=query,
        )

        return NoteListResponse.create(
            items=[note_to_list_item(note) for note in notes],
            total=total_count,
            page=page,
            per_page=per_page,
        )

    async def list_trash(self, user_id: UUID, page: int = 1, per_page: int = 50) -> NoteListResponse:
        page = max(page, 1)
        per_page = self._page_size(per_page)

        notes, total_count = await self.note_repo.list_trash(user_id, page=page, per_page=per_page)
        return NoteListResponse.create(
            items=[note_to_list_item(note) for note in notes],
            total=total_count,
            page=page,
            per_page=per_page,
        )

    async def empty_trash(self, user_id: UUID) -> int:
        deleted = await self.note_repo.empty_trash(user_id)
        if deleted:
            await self.redis.invalidate_stats(user_id)
        logger.info(f"Emptied trash of user {user_id}: {deleted} notes")
        return deleted

    async def list_versions(self, note_id: UUID, user_id: UUID) -> List[NoteVersionResponse]:
        note = await self._get_owned_note(note_id, user_id)
        self._reject_locked(note)

        versions = await self.version_repo.list_for_note(note.id, limit=self.settings.max_versions_per_note)
        return [NoteVersionResponse.model_validate(v) for v in versions]

    async def restore_version(
        self, note_id: UUID, version_id: UUID, user_id: UUID
    ) -> NoteResponse:
        note = await self._get_owned_note(note_id, user_id)
        self._reject_locked(note)

        version = await self.version_repo.get_for_note(version_id, note.id)
        if not version:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Version not found")

        updated = await self._snapshot_and_apply(
            note, {"title": version.title, "content": version.content}
        )
        await self.redis.invalidate_stats(user_id)
        return note_to_response(updated)
