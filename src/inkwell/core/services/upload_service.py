"""Media upload for the editor."""

import secrets
from pathlib import Path
from uuid import UUID

from fastapi import HTTPException, UploadFile, status

from ...config import get_settings
from ..logging import get_logger
from ..schemas.uploads import UploadResponse
from .interfaces import IUploadService

logger = get_logger("services.uploads")

CHUNK_SIZE = 1024 * 1024


class UploadService(IUploadService):
    """Stores files under ``upload_dir/<user_id>/`` with random names."""

    def __init__(self):
        self.settings = get_settings()

    @property
    def max_bytes(self) -> int:
        return self.settings.max_file_size_mb * 1024 * 1024

    def _extension(self, filename: str) -> str:
        ext = Path(filename).suffix.lower()
        allowed = {e.lower() for e in self.settings.allowed_file_extensions}
        if not ext or ext not in allowed:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"File type not allowed: {ext or filename}",
            )
        return ext

    async def save_upload(self, user_id: UUID, file: UploadFile) -> UploadResponse:
        if not file.filename:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing file")

        ext = self._extension(file.filename)

        user_dir = Path(self.settings.upload_dir) / str(user_id)
        user_dir.mkdir(parents=True, exist_ok=True)
        stored_name = f"{secrets.token_urlsafe(16)}{ext}"
        target = user_dir / stored_name

        size = 0
        try:
            with open(target, "wb") as out:
                while chunk := await file.read(CHUNK_SIZE):
                    size += len(chunk)
                    if size > self.max_bytes:
                        raise HTTPException(
                            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                            detail=f"File exceeds {self.settings.max_file_size_mb} MB",
                        )
                    out.write(chunk)
        except HTTPException:
            target.unlink(missing_ok=True)
            raise
        finally:
            await file.close()

        logger.info(f"Stored upload {stored_name} ({size} bytes) for user {user_id}")
        prefix = self.settings.upload_url_prefix.rstrip("/")
        return UploadResponse(
            url=f"{prefix}/{user_id}/{stored_name}",
            filename=file.filename,
            size=size,
            content_type=file.content_type,
        )
