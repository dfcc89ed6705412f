"""Comment schemas."""

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator


class CommentCreate(BaseModel):
    """New comment on a note."""

    content: Annotated[str, StringConstraints(strip_whitespace=True, max_length=2000)] = Field(
        description="Comment text"
    )

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Comment cannot be empty")
        return v


class CommentResponse(BaseModel):
    id: uuid.UUID
    note_id: uuid.UUID
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
