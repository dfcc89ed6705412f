"""Tag service implementation."""

from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.tag import DEFAULT_TAG_COLOR, Tag
from ..repositories.tag_repository import TagRepository
from ..schemas.tags import TagCreate, TagResponse, TagUpdate
from .interfaces import ITagService


def _tag_to_response(tag: Tag, note_count: int) -> TagResponse:
    return TagResponse(id=tag.id, name=tag.name, color=tag.color, note_count=note_count)


class TagService(ITagService):
    """Tag names are unique per user, ignoring case."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.tag_repo = TagRepository(session)

    async def _ensure_name_free(
        self, user_id: UUID, name: str, exclude_id: Optional[UUID] = None
    ) -> None:
        existing = await self.tag_repo.find_by_name(user_id, name)
        if existing and existing.id != exclude_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Tag already exists")

    async def list_tags(self, user_id: UUID) -> List[TagResponse]:
        rows = await self.tag_repo.list_with_counts(user_id)
        return [_tag_to_response(tag, count) for tag, count in rows]

    async def create_tag(self, user_id: UUID, request: TagCreate) -> TagResponse:
        name = Tag.normalize_name(request.name)
        await self._ensure_name_free(user_id, name)

        tag = await self.tag_repo.create_tag(
            {"name": name, "color": request.color or DEFAULT_TAG_COLOR, "user_id": user_id}
        )
        return _tag_to_response(tag, 0)

    async def update_tag(self, tag_id: UUID, user_id: UUID, request: TagUpdate) -> TagResponse:
        tag = await self.tag_repo.get_by_id_and_user(tag_id, user_id)
        if not tag:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")

        update_data = request.model_dump(exclude_unset=True, exclude_none=True)
        if "name" in update_data:
            update_data["name"] = Tag.normalize_name(update_data["name"])
            await self._ensure_name_free(user_id, update_data["name"], exclude_id=tag.id)

        if update_data:
            tag = await self.tag_repo.update_tag(tag, update_data)

        note_count = await self.tag_repo.count_notes(tag.id)
        return _tag_to_response(tag, note_count)

    async def delete_tag(self, tag_id: UUID, user_id: UUID) -> None:
        tag = await self.tag_repo.get_by_id_and_user(tag_id, user_id)
        if not tag:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tag not found")
        await self.tag_repo.delete_tag(tag)
