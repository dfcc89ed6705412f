"""Media upload endpoint."""

from uuid import UUID

from fastapi import APIRouter, Depends, File, UploadFile, status

from ..core.schemas.uploads import UploadResponse
from ..core.services import UploadService
from ..middleware.auth import get_current_user_id

router = APIRouter(tags=["uploads"])


@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_file(
    file: UploadFile = File(...),
    current_user_id: UUID = Depends(get_current_user_id),
):
    """Store an image, video, audio or PDF file for embedding in a note."""
    return await UploadService().save_upload(current_user_id, file)
