# Tag models for organizing notes
import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, ForeignKey, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import BaseModel
from .types import GUID

if TYPE_CHECKING:
    from .note import Note

DEFAULT_TAG_COLOR = "#bf6a3d"


class Tag(BaseModel):
    """Tag for categorizing notes. Tags are private to the user who made them."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(50), nullable=False)
    color: Mapped[str] = mapped_column(String(7), default=DEFAULT_TAG_COLOR, nullable=False)

    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    # link rows go away through the FK cascade, never loaded from this side
    notes: Mapped[List["Note"]] = relationship(
        "Note",
        secondary="note_tags",
        back_populates="tags",
        lazy="noload",
        passive_deletes=True,
        doc="Notes that have this tag",
    )

    __table_args__ = (
        UniqueConstraint("user_id", "name", name="uq_tags_user_name"),
        # Enforce max lengths at DB level even on SQLite
        CheckConstraint("length(name) <= 50", name="ck_tags_name_len"),
        CheckConstraint("length(color) <= 7", name="ck_tags_color_len"),
        Index("idx_tags_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Tag(name='{self.name}')>"

    @classmethod
    def normalize_name(cls, name: str) -> str:
        """Clean up tag name."""
        clean = name.strip()
        if not clean:
            raise ValueError("Tag name cannot be empty")
        return clean


class NoteTag(BaseModel):
    """Links notes to tags."""

    __tablename__ = "note_tags"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    tag_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("tags.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("note_id", "tag_id", name="uq_note_tags_note_tag"),
        Index("idx_note_tags_note_id", "note_id"),
        Index("idx_note_tags_tag_id", "tag_id"),
    )

    def __repr__(self) -> str:
        return f"<NoteTag(note_id={self.note_id}, tag_id={self.tag_id})>"
