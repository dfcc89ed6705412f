"""Note repository for database operations."""

from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import and_, delete, desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..models.note import Note
from ..models.tag import Tag


class NoteRepository:
    """Repository for note database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        return await self._reload(note.id)

    async def _reload(self, note_id: UUID) -> Note:
        # populate_existing so a note already in the identity map picks up fresh tags
        stmt = (
            select(Note)
            .options(selectinload(Note.tags))
            .where(Note.id == note_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def get_by_id_and_user(
        self, note_id: UUID, user_id: UUID, include_deleted: bool = True
    ) -> Optional[Note]:
        """Get note by ID if owned by user."""
        stmt = (
            select(Note)
            .options(selectinload(Note.tags))
            .where(and_(Note.id == note_id, Note.user_id == user_id))
        )
        if not include_deleted:
            stmt = stmt.where(Note.deleted_at.is_(None))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Write the given fields onto a loaded note."""
        for key, value in update_data.items():
            setattr(note, key, value)

        await self.session.commit()
        return await self._reload(note.id)

    async def save(self, note: Note) -> Note:
        """Commit pending changes on a loaded note."""
        await self.session.commit()
        return await self._reload(note.id)

    async def set_tags(self, note: Note, tags: Sequence[Tag]) -> Note:
        """Replace the note's tag set."""
        note.tags = list(tags)
        await self.session.commit()
        return await self._reload(note.id)

    async def delete_note(self, note: Note) -> None:
        """Remove a note for good; versions, comments and tag links cascade."""
        await self.session.execute(delete(Note).where(Note.id == note.id))
        await self.session.commit()
        self.session.expunge_all()

    async def empty_trash(self, user_id: UUID) -> int:
        """Permanently delete every trashed note of the user."""
        stmt = delete(Note).where(and_(Note.user_id == user_id, Note.deleted_at.is_not(None)))
        result = await self.session.execute(stmt)
        await self.session.commit()
        self.session.expunge_all()
        return result.rowcount or 0

    async def list_user_notes(
        self,
        user_id: UUID,
        page: int = 1,
        per_page: int = 50,
        folder_id: Optional[UUID] = None,
        uncategorized: bool = False,
        tag_id: Optional[UUID] = None,
        query: Optional[str] = None,
    ) -> tuple[List[Note], int]:
        """List live notes, pinned first and most recently edited next."""
        conditions = [Note.user_id == user_id, Note.deleted_at.is_(None)]

        if uncategorized:
            conditions.append(Note.folder_id.is_(None))
        elif folder_id is not None:
            conditions.append(Note.folder_id == folder_id)

        if tag_id is not None:
            conditions.append(Note.tags.any(Tag.id == tag_id))

        if query and query.strip():
            term = query.strip()
            conditions.append(
                or_(
                    Note.title.icontains(term, autoescape=True),
                    # the body of a locked note is not searchable
                    and_(Note.lock_hash.is_(None), Note.content.icontains(term, autoescape=True)),
                    Note.tags.any(Tag.name.icontains(term, autoescape=True)),
                )
            )

        count_stmt = select(func.count(Note.id)).where(*conditions)
        total_result = await self.session.execute(count_stmt)
        total_count = total_result.scalar() or 0

        offset = (page - 1) * per_page
        stmt = (
            select(Note)
            .options(selectinload(Note.tags))
            .where(*conditions)
            .order_by(desc(Note.pinned), desc(Note.updated_at))
            .offset(offset)
            .limit(per_page)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars()), total_count

    async def list_trash(
        self, user_id: UUID, page: int = 1, per_page: int = 50
    ) -> tuple[List[Note], int]:
        """Trashed notes, most recently deleted first."""
        in_trash = and_(Note.user_id == user_id, Note.deleted_at.is_not(None))

        total_result = await self.session.execute(select(func.count(Note.id)).where(in_trash))
        total_count = total_result.scalar() or 0

        stmt = (
            select(Note)
            .options(selectinload(Note.tags))
            .where(in_trash)
            .order_by(desc(Note.deleted_at))
            .offset((page - 1) * per_page)
            .limit(per_page)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars()), total_count

    async def list_live_notes(self, user_id: UUID) -> List[Note]:
        """Every note outside the trash, newest first."""
        stmt = (
            select(Note)
            .options(selectinload(Note.tags))
            .where(and_(Note.user_id == user_id, Note.deleted_at.is_(None)))
            .order_by(desc(Note.created_at))
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def get_random_note(self, user_id: UUID) -> Optional[Note]:
        """Pick one live note at random."""
        stmt = (
            select(Note)
            .options(selectinload(Note.tags))
            .where(and_(Note.user_id == user_id, Note.deleted_at.is_(None)))
            .order_by(func.random())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def creation_dates_since(self, user_id: UUID, since: datetime) -> List[datetime]:
        """Creation times of the user's notes, trash included."""
        stmt = select(Note.created_at).where(
            and_(Note.user_id == user_id, Note.created_at >= since)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())
