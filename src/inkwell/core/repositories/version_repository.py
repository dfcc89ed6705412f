"""Note version repository for database operations."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, delete, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note
from ..models.note_version import NoteVersion


class VersionRepository:
    """Repository for note snapshots."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def add_version(self, note_id: UUID, title: str, content: str) -> NoteVersion:
        """Stage a snapshot; it is written with the caller's next commit."""
        version = NoteVersion(note_id=note_id, title=title, content=content)
        self.session.add(version)
        return version

    async def prune(self, note_id: UUID, keep: int) -> int:
        """Drop the oldest snapshots beyond ``keep``."""
        stmt = (
            select(NoteVersion.id)
            .where(NoteVersion.note_id == note_id)
            .order_by(desc(NoteVersion.created_at))
            .offset(keep)
        )
        result = await self.session.execute(stmt)
        stale = list(result.scalars())
        if not stale:
            return 0

        await self.session.execute(delete(NoteVersion).where(NoteVersion.id.in_(stale)))
        await self.session.commit()
        return len(stale)

    async def list_for_note(self, note_id: UUID, limit: int = 50) -> List[NoteVersion]:
        """Snapshots newest first."""
        stmt = (
            select(NoteVersion)
            .where(NoteVersion.note_id == note_id)
            .order_by(desc(NoteVersion.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def get_for_note(self, version_id: UUID, note_id: UUID) -> Optional[NoteVersion]:
        """Get one snapshot, only if it belongs to the note."""
        stmt = select(NoteVersion).where(
            and_(NoteVersion.id == version_id, NoteVersion.note_id == note_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def snapshot_dates_since(self, user_id: UUID, since: datetime) -> List[datetime]:
        """Creation times of snapshots across the user's notes."""
        stmt = (
            select(NoteVersion.created_at)
            .join(Note, Note.id == NoteVersion.note_id)
            .where(and_(Note.user_id == user_id, NoteVersion.created_at >= since))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())
