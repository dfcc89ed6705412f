# Snapshots of earlier note states
import uuid

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class NoteVersion(BaseModel):
    """Title and content of a note as they were before an edit."""

    __tablename__ = "note_versions"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    title: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    content: Mapped[str] = mapped_column(Text, default="", nullable=False)

    __table_args__ = (
        Index("idx_note_versions_note_created", "note_id", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<NoteVersion(note_id={self.note_id}, created_at={self.created_at})>"
