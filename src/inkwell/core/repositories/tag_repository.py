"""Tag repository for database operations."""

from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import and_, delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note
from ..models.tag import NoteTag, Tag


class TagRepository:
    """Repository for tag database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_tag(self, tag_data: dict) -> Tag:
        """Create new tag."""
        tag = Tag(**tag_data)
        self.session.add(tag)
        await self.session.commit()
        await self.session.refresh(tag)
        return tag

    async def get_by_id_and_user(self, tag_id: UUID, user_id: UUID) -> Optional[Tag]:
        """Get tag by ID if owned by user."""
        stmt = select(Tag).where(and_(Tag.id == tag_id, Tag.user_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_many_for_user(self, tag_ids: Sequence[UUID], user_id: UUID) -> List[Tag]:
        """Load the user's tags among the given IDs; foreign IDs are skipped."""
        if not tag_ids:
            return []
        stmt = select(Tag).where(and_(Tag.id.in_(list(tag_ids)), Tag.user_id == user_id))
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def find_by_name(self, user_id: UUID, name: str) -> Optional[Tag]:
        """Case-insensitive lookup of one of the user's tags.

        Names are compared with ``str.casefold``, so non-ASCII letters match too.
        """
        result = await self.session.execute(select(Tag).where(Tag.user_id == user_id))
        key = name.casefold()
        return next((tag for tag in result.scalars() if tag.name.casefold() == key), None)

    async def list_with_counts(self, user_id: UUID) -> List[Tuple[Tag, int]]:
        """List user tags by name, each with its count of live notes."""
        counts = (
            select(NoteTag.tag_id, func.count(NoteTag.note_id).label("note_count"))
            .join(Note, Note.id == NoteTag.note_id)
            .where(Note.user_id == user_id, Note.deleted_at.is_(None))
            .group_by(NoteTag.tag_id)
            .subquery()
        )
        stmt = (
            select(Tag, func.coalesce(counts.c.note_count, 0))
            .outerjoin(counts, counts.c.tag_id == Tag.id)
            .where(Tag.user_id == user_id)
            .order_by(Tag.name)
        )
        result = await self.session.execute(stmt)
        return [(tag, count) for tag, count in result.all()]

    async def count_notes(self, tag_id: UUID) -> int:
        """Count live notes carrying the tag."""
        stmt = (
            select(func.count(NoteTag.note_id))
            .join(Note, Note.id == NoteTag.note_id)
            .where(NoteTag.tag_id == tag_id, Note.deleted_at.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update_tag(self, tag: Tag, update_data: dict) -> Tag:
        """Write the given fields onto a loaded tag."""
        for key, value in update_data.items():
            setattr(tag, key, value)

        await self.session.commit()
        await self.session.refresh(tag)
        return tag

    async def delete_tag(self, tag: Tag) -> None:
        """Delete a tag; its note links cascade."""
        await self.session.execute(delete(Tag).where(Tag.id == tag.id))
        await self.session.commit()
        # notes in the identity map still hold the tag in their collections
        self.session.expunge_all()
