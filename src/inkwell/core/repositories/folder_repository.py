"""Folder repository for database operations."""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import and_, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.folder import Folder
from ..models.note import Note


class FolderRepository:
    """Repository for folder database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_folder(self, folder_data: dict) -> Folder:
        """Create new folder."""
        folder = Folder(**folder_data)
        self.session.add(folder)
        await self.session.commit()
        await self.session.refresh(folder)
        return folder

    async def get_by_id_and_user(self, folder_id: UUID, user_id: UUID) -> Optional[Folder]:
        """Get folder by ID if owned by user."""
        stmt = select(Folder).where(and_(Folder.id == folder_id, Folder.user_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_with_counts(self, user_id: UUID) -> List[Tuple[Folder, int]]:
        """List user folders by name, each with its count of live notes."""
        counts = (
            select(Note.folder_id, func.count(Note.id).label("note_count"))
            .where(
                Note.user_id == user_id,
                Note.deleted_at.is_(None),
                Note.folder_id.is_not(None),
            )
            .group_by(Note.folder_id)
            .subquery()
        )
        stmt = (
            select(Folder, func.coalesce(counts.c.note_count, 0))
            .outerjoin(counts, counts.c.folder_id == Folder.id)
            .where(Folder.user_id == user_id)
            .order_by(Folder.name)
        )
        result = await self.session.execute(stmt)
        return [(folder, count) for folder, count in result.all()]

    async def count_notes(self, folder_id: UUID) -> int:
        """Count live notes in one folder."""
        stmt = select(func.count(Note.id)).where(
            Note.folder_id == folder_id, Note.deleted_at.is_(None)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def update_folder(self, folder_id: UUID, user_id: UUID, update_data: dict) -> Optional[Folder]:
        """Update folder if owned by user."""
        folder = await self.get_by_id_and_user(folder_id, user_id)
        if not folder:
            return None

        for key, value in update_data.items():
            setattr(folder, key, value)

        await self.session.commit()
        await self.session.refresh(folder)
        return folder

    async def delete_folder(self, folder_id: UUID, user_id: UUID) -> bool:
        """Delete folder if owned by user; its notes become uncategorized."""
        folder = await self.get_by_id_and_user(folder_id, user_id)
        if not folder:
            return False

        # notes stay, uncategorized
        await self.session.execute(
            update(Note)
            .where(and_(Note.folder_id == folder_id, Note.user_id == user_id))
            .values(folder_id=None)
        )
        await self.session.execute(delete(Folder).where(Folder.id == folder_id))
        await self.session.commit()
        return True
