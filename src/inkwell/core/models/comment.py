# Margin comments left on a note
import uuid

from sqlalchemy import CheckConstraint, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID


class Comment(BaseModel):
    """Comment attached to a note."""

    __tablename__ = "comments"

    note_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("notes.id", ondelete="CASCADE"), nullable=False
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        CheckConstraint("length(content) <= 2000", name="ck_comments_content_len"),
        Index("idx_comments_note_id", "note_id"),
    )

    def __repr__(self) -> str:
        return f"<Comment(note_id={self.note_id})>"
