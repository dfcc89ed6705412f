"""Upload schemas."""

from typing import Optional

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Where an uploaded file can be fetched from."""

    url: str = Field(description="Public URL the editor embeds")
    filename: str = Field(description="Original file name")
    size: int = Field(description="Size in bytes")
    content_type: Optional[str] = Field(default=None, description="MIME type reported by the client")
