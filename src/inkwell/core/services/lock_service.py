"""Per-note password locks."""

from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...security import hash_password, verify_password
from ..logging import get_logger
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..schemas.notes import NoteResponse
from .interfaces import ILockService
from .note_service import note_not_found, note_to_response

logger = get_logger("services.locks")


class LockService(ILockService):
    """Lock, unlock and unlock-for-good notes with their own password.

    Locking only hides the body on read paths; the stored content is not
    encrypted.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def _get_owned_note(self, note_id: UUID, user_id: UUID) -> Note:
        note = await self.note_repo.get_by_id_and_user(note_id, user_id)
        if not note:
            raise note_not_found()
        return note

    @staticmethod
    def _check_password(note: Note, password: str) -> None:
        if not verify_password(password, note.lock_hash):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Incorrect password")

    async def lock_note(self, note_id: UUID, user_id: UUID, password: str) -> NoteResponse:
        note = await self._get_owned_note(note_id, user_id)
        if note.is_locked:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Note is already locked"
            )

        note = await self.note_repo.update_note(note, {"lock_hash": hash_password(password)})
        logger.info(f"Locked note {note_id}")
        return note_to_response(note)

    async def unlock_note(self, note_id: UUID, user_id: UUID, password: str) -> NoteResponse:
        """Reveal a locked note's content; the lock itself stays."""
        note = await self._get_owned_note(note_id, user_id)
        if note.is_locked:
            self._check_password(note, password)
        return note_to_response(note, reveal=True)

    async def remove_lock(self, note_id: UUID, user_id: UUID, password: str) -> NoteResponse:
        note = await self._get_owned_note(note_id, user_id)
        if not note.is_locked:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Note is not locked")

        self._check_password(note, password)
        note = await self.note_repo.update_note(note, {"lock_hash": None})
        logger.info(f"Removed lock from note {note_id}")
        return note_to_response(note)
