"""Tag schemas."""

import uuid
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

from .common import ColorMixin

TagName = Annotated[str, StringConstraints(strip_whitespace=True, max_length=50)]


class TagCreate(ColorMixin):
    """Tag creation request."""

    name: TagName = Field(description="Tag name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Tag name cannot be empty")
        return v

    model_config = ConfigDict(json_schema_extra={"example": {"name": "ideas", "color": "#5b7fa5"}})


class TagUpdate(ColorMixin):
    """Tag update request; omitted fields stay as they are."""

    name: Optional[TagName] = Field(default=None, description="Tag name")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("Tag name cannot be empty")
        return v


class TagSummary(BaseModel):
    """Tag as embedded in a note."""

    id: uuid.UUID
    name: str
    color: str

    model_config = ConfigDict(from_attributes=True)


class TagResponse(TagSummary):
    """Tag with usage count."""

    note_count: int = Field(default=0, description="Notes carrying this tag, trash excluded")
