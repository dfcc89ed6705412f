"""Folder service implementation."""

from typing import List
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..logging import get_logger
from ..models.folder import DEFAULT_FOLDER_COLOR, Folder
from ..repositories.folder_repository import FolderRepository
from ..schemas.folders import FolderCreate, FolderResponse, FolderUpdate
from .interfaces import IFolderService

logger = get_logger("services.folders")


def _folder_to_response(folder: Folder, note_count: int) -> FolderResponse:
    return FolderResponse(
        id=folder.id,
        name=folder.name,
        color=folder.color,
        note_count=note_count,
        created_at=folder.created_at,
        updated_at=folder.updated_at,
    )


class FolderService(IFolderService):
    """Folder service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.folder_repo = FolderRepository(session)

    async def list_folders(self, user_id: UUID) -> List[FolderResponse]:
        rows = await self.folder_repo.list_with_counts(user_id)
        return [_folder_to_response(folder, count) for folder, count in rows]

    async def create_folder(self, user_id: UUID, request: FolderCreate) -> FolderResponse:
        folder = await self.folder_repo.create_folder(
            {
                "name": request.name,
                "color": request.color or DEFAULT_FOLDER_COLOR,
                "user_id": user_id,
            }
        )
        return _folder_to_response(folder, 0)

    async def update_folder(
        self, folder_id: UUID, user_id: UUID, request: FolderUpdate
    ) -> FolderResponse:
        update_data = request.model_dump(exclude_unset=True, exclude_none=True)
        folder = await self.folder_repo.update_folder(folder_id, user_id, update_data)
        if not folder:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Folder not found")

        note_count = await self.folder_repo.count_notes(folder.id)
        return _folder_to_response(folder, note_count)

    async def delete_folder(self, folder_id: UUID, user_id: UUID) -> None:
        """Delete folder, uncategorizing its notes."""
        if not await self.folder_repo.delete_folder(folder_id, user_id):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Folder not found")
        logger.info(f"Deleted folder {folder_id}")
