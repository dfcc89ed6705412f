"""
Note management schemas.

These schemas define the API contracts for note CRUD operations, the trash,
version history, note locks and writing statistics.
"""

import uuid
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import PaginationResponse
from .tags import TagSummary


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(default="", max_length=200, description="Note title")
    content: str = Field(default="", description="Note body as editor HTML")
    folder_id: Optional[uuid.UUID] = Field(default=None, description="Folder to file the note in")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Reading list",
                "content": "<h2>Autumn</h2><ul><li><p>The Rings of Saturn</p></li></ul>",
                "folder_id": None,
            }
        }
    )


class NoteUpdate(BaseModel):
    """Note update request schema.

    Only fields present in the request body are written; an explicit
    ``"folder_id": null`` moves the note out of its folder.
    """

    title: Optional[str] = Field(default=None, max_length=200, description="Note title")
    content: Optional[str] = Field(default=None, description="Note body as editor HTML")
    pinned: Optional[bool] = Field(default=None, description="Keep the note at the top of lists")
    folder_id: Optional[uuid.UUID] = Field(default=None, description="Folder, or null for none")

    def changes(self) -> Dict[str, object]:
        """Fields the client actually sent, nulls dropped except for folder_id."""
        data = self.model_dump(exclude_unset=True)
        return {k: v for k, v in data.items() if v is not None or k == "folder_id"}

    model_config = ConfigDict(
        json_schema_extra={"example": {"content": "<p>Second draft</p>", "pinned": True}}
    )


class NoteTagsUpdate(BaseModel):
    """Replace a note's tag set."""

    tag_ids: List[uuid.UUID] = Field(default_factory=list, description="Tags to keep on the note")


class NoteResponse(BaseModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body; empty while the note is locked")
    pinned: bool = Field(description="Pinned to the top")
    folder_id: Optional[uuid.UUID] = Field(default=None, description="Folder the note is filed in")
    tags: List[TagSummary] = Field(default_factory=list, description="Note tags")
    locked: bool = Field(default=False, description="Whether a note password is set")
    char_count: int = Field(default=0, description="Plain-text characters in the body")

    # Timestamps
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
    deleted_at: Optional[datetime] = Field(default=None, description="When the note was trashed")

    model_config = ConfigDict(from_attributes=True)


class NoteListItem(BaseModel):
    """Simplified note schema for list views."""

    id: uuid.UUID
    title: str
    content_preview: str = Field(description="Plain-text preview (first 200 chars)")
    pinned: bool
    folder_id: Optional[uuid.UUID] = None
    tags: List[TagSummary] = Field(default_factory=list)
    locked: bool = False
    char_count: int = 0
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class NoteListResponse(PaginationResponse[NoteListItem]):
    """Paginated note list response."""


class NoteVersionResponse(BaseModel):
    """A saved snapshot of a note."""

    id: uuid.UUID
    note_id: uuid.UUID
    title: str
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotePasswordRequest(BaseModel):
    """Password for locking, unlocking or removing a note lock."""

    password: str = Field(min_length=4, max_length=128, description="Note password")


class TrashEmptyResponse(BaseModel):
    deleted: int = Field(description="Notes permanently removed")


class StatsResponse(BaseModel):
    """Writing activity for the current user."""

    heatmap: Dict[str, int] = Field(description="Activity count per day (YYYY-MM-DD)")
    streak: int = Field(description="Consecutive active days up to today")
    total_notes: int = Field(description="Notes outside the trash")
    total_chars: int = Field(description="Plain-text characters across those notes")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "heatmap": {"2026-10-16": 3, "2026-10-17": 1},
                "streak": 2,
                "total_notes": 41,
                "total_chars": 18230,
            }
        }
    )
