"""Folder schemas."""

import uuid
from datetime import datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from .common import ColorMixin

FolderName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]


class FolderCreate(ColorMixin):
    """Folder creation request."""

    name: FolderName = Field(description="Folder name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Folder name cannot be empty")
        return v

    model_config = ConfigDict(json_schema_extra={"example": {"name": "Journal", "color": "#6a8f6e"}})


class FolderUpdate(ColorMixin):
    """Folder update request; omitted fields stay as they are."""

    name: Optional[FolderName] = Field(default=None, description="Folder name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Folder name cannot be empty")
        return v


class FolderResponse(BaseModel):
    """Folder with the number of live notes filed in it."""

    id: uuid.UUID
    name: str
    color: str
    note_count: int = Field(default=0, description="Notes in this folder, trash excluded")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
