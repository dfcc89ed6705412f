"""Comment endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.comments import CommentCreate, CommentResponse
from ..core.services import CommentService
from ..database import get_db_session
from ..middleware.auth import get_current_user_id

router = APIRouter(tags=["comments"])


@router.get("/notes/{note_id}/comments", response_model=List[CommentResponse])
async def list_comments(
    note_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    """Comments on a note, oldest first."""
    return await CommentService(session).list_comments(note_id, current_user_id)


@router.post(
    "/notes/{note_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    note_id: UUID,
    request: CommentCreate,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    return await CommentService(session).add_comment(note_id, current_user_id, request)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: UUID,
    current_user_id: UUID = Depends(get_current_user_id),
    session: AsyncSession = Depends(get_db_session),
):
    await CommentService(session).delete_comment(comment_id, current_user_id)
