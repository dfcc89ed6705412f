"""Comment repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.comment import Comment
from ..models.note import Note


class CommentRepository:
    """Repository for note comments."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_comment(self, note_id: UUID, content: str) -> Comment:
        comment = Comment(note_id=note_id, content=content)
        self.session.add(comment)
        await self.session.commit()
        await self.session.refresh(comment)
        return comment

    async def list_for_note(self, note_id: UUID) -> List[Comment]:
        """Comments oldest first."""
        stmt = (
            select(Comment)
            .where(Comment.note_id == note_id)
            .order_by(Comment.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def get_by_id_and_user(self, comment_id: UUID, user_id: UUID) -> Optional[Comment]:
        """Get a comment if the note it hangs on belongs to the user."""
        stmt = (
            select(Comment)
            .join(Note, Note.id == Comment.note_id)
            .where(and_(Comment.id == comment_id, Note.user_id == user_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def delete_comment(self, comment: Comment) -> None:
        await self.session.delete(comment)
        await self.session.commit()
