"""Comment service implementation."""

from typing import List
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..repositories.comment_repository import CommentRepository
from ..repositories.note_repository import NoteRepository
from ..schemas.comments import CommentCreate, CommentResponse
from .interfaces import ICommentService
from .note_service import note_not_found


class CommentService(ICommentService):
    """Comments hang off notes and share their owner."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.comment_repo = CommentRepository(session)
        self.note_repo = NoteRepository(session)

    async def _ensure_note(self, note_id: UUID, user_id: UUID) -> None:
        if not await self.note_repo.get_by_id_and_user(note_id, user_id):
            raise note_not_found()

    async def list_comments(self, note_id: UUID, user_id: UUID) -> List[CommentResponse]:
        await self._ensure_note(note_id, user_id)
        comments = await self.comment_repo.list_for_note(note_id)
        return [CommentResponse.model_validate(c) for c in comments]

    async def add_comment(
        self, note_id: UUID, user_id: UUID, request: CommentCreate
    ) -> CommentResponse:
        await self._ensure_note(note_id, user_id)
        comment = await self.comment_repo.create_comment(note_id, request.content)
        return CommentResponse.model_validate(comment)

    async def delete_comment(self, comment_id: UUID, user_id: UUID) -> None:
        comment = await self.comment_repo.get_by_id_and_user(comment_id, user_id)
        if not comment:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")
        await self.comment_repo.delete_comment(comment)
