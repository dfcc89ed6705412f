"""Note lock endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.notes import NotePasswordRequest, NoteResponse
from ..core.services import LockService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(prefix="/notes", tags=["locks"])


@router.post("/{note_id}/lock", response_model=NoteResponse)
async def lock_note(
    note_id: UUID,
    request: NotePasswordRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Protect a note with its own password."""
    return await LockService(session).lock_note(note_id, current_user_id, request.password)


@router.post("/{note_id}/unlock", response_model=NoteResponse)
async def unlock_note(
    note_id: UUID,
    request: NotePasswordRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Return the full note; it stays locked for later reads."""
    return await LockService(session).unlock_note(note_id, current_user_id, request.password)


@router.post("/{note_id}/remove-lock", response_model=NoteResponse)
async def remove_lock(
    note_id: UUID,
    request: NotePasswordRequest,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    return await LockService(session).remove_lock(note_id, current_user_id, request.password)
