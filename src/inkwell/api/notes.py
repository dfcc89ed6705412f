"""Notes API endpoints."""

from typing import List, Optional, Union
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import get_settings
from ..core.schemas.notes import (
    NoteCreate,
    NoteListItem,
    NoteListResponse,
    NoteResponse,
    NoteTagsUpdate,
    NoteUpdate,
    NoteVersionResponse,
    StatsResponse,
    TrashEmptyResponse,
)
from ..core.services import NoteService, StatsService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/notes", tags=["notes"])
settings = get_settings()


@router.get("", response_model=NoteListResponse)
async def list_notes(
    folder_id: Optional[UUID] = Query(None, description="Only notes in this folder"),
    uncategorized: bool = Query(False, description="Only notes without a folder"),
    tag_id: Optional[UUID] = Query(None, description="Only notes with this tag"),
    q: Optional[str] = Query(None, max_length=200, description="Search title, body and tags"),
    page: int = Query(1, ge=1),
    per_page: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List notes outside the trash, pinned first."""
    note_service = NoteService(session)
    return await note_service.list_user_notes(
        user_id=current_user_id,
        page=page,
        per_page=per_page,
        folder_id=folder_id,
        uncategorized=uncategorized,
        tag_id=tag_id,
        query=q,
    )


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(current_user_id, request)


# Fixed paths come before /{note_id}


@router.get("/trash", response_model=NoteListResponse)
async def list_trash(
    page: int = Query(1, ge=1),
    per_page: int = Query(settings.default_page_size, ge=1, le=settings.max_page_size),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """List trashed notes, most recently deleted first."""
    note_service = NoteService(session)
    return await note_service.list_trash(current_user_id, page=page, per_page=per_page)


@router.delete("/trash", response_model=TrashEmptyResponse)
async def empty_trash(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Permanently delete everything in the trash."""
    note_service = NoteService(session)
    deleted = await note_service.empty_trash(current_user_id)
    return TrashEmptyResponse(deleted=deleted)


@router.get("/random", response_model=Union[NoteResponse, List[NoteListItem], None])
async def resurface_notes(
    mode: str = Query("random", pattern="^(random|thisday)$"),
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """A random note, or the notes written on this day in earlier years."""
    stats_service = StatsService(session)
    return await stats_service.resurface(current_user_id, mode=mode)


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Activity heatmap, streak and totals."""
    stats_service = StatsService(session)
    return await stats_service.get_stats(current_user_id)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(note_id, current_user_id)


@router.patch("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Update title, content, pin state or folder of a note."""
    note_service = NoteService(session)
    return await note_service.update_note(note_id, current_user_id, request)


@router.put("/{note_id}/tags", response_model=NoteResponse)
async def set_note_tags(
    note_id: UUID,
    request: NoteTagsUpdate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Replace the tags of a note."""
    note_service = NoteService(session)
    return await note_service.set_note_tags(note_id, current_user_id, request.tag_ids)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Move a note to the trash."""
    note_service = NoteService(session)
    await note_service.delete_note(note_id, current_user_id)


@router.post("/{note_id}/restore", response_model=NoteResponse)
async def restore_note(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Take a note out of the trash."""
    note_service = NoteService(session)
    return await note_service.restore_note(note_id, current_user_id)


@router.delete("/{note_id}/permanent", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note_permanently(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note with its versions and comments."""
    note_service = NoteService(session)
    await note_service.delete_note_permanently(note_id, current_user_id)


@router.get("/{note_id}/versions", response_model=List[NoteVersionResponse])
async def list_versions(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Saved snapshots of a note, newest first."""
    note_service = NoteService(session)
    return await note_service.list_versions(note_id, current_user_id)


@router.post("/{note_id}/versions/{version_id}/restore", response_model=NoteResponse)
async def restore_version(
    note_id: UUID,
    version_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Bring back an earlier title and content."""
    note_service = NoteService(session)
    return await note_service.restore_version(note_id, version_id, current_user_id)
