# Note model for user content
import uuid
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Index, String, Text, event
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.orm import attributes as orm_attributes

from ..html import html_to_text
from .base import BaseModel, utcnow
from .types import GUID, UTCDateTime

if TYPE_CHECKING:
    from .tag import Tag


class Note(BaseModel):
    """Note with rich-text (HTML) content."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(200), default="", nullable=False)
    content: Mapped[str] = mapped_column(Text, default="", nullable=False)
    pinned: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    folder_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        GUID(), ForeignKey("folders.id", ondelete="SET NULL"), nullable=True
    )

    # soft delete: non-null means the note sits in the trash
    deleted_at: Mapped[Optional[datetime]] = mapped_column(UTCDateTime(), nullable=True)

    # passlib hash of the note password; non-null means locked
    lock_hash: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary="note_tags",
        back_populates="notes",
        lazy="selectin",
        order_by="Tag.name",
        doc="Tags associated with this note",
    )

    __table_args__ = (
        Index("idx_notes_user_id", "user_id"),
        Index("idx_notes_folder_id", "folder_id"),
        Index("idx_notes_user_deleted", "user_id", "deleted_at"),
        Index("idx_notes_user_updated", "user_id", "updated_at"),
        CheckConstraint("length(title) <= 200", name="ck_notes_title_len"),
    )

    def __repr__(self) -> str:
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', user_id={self.user_id})>"

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @property
    def is_locked(self) -> bool:
        return self.lock_hash is not None

    @property
    def plain_text(self) -> str:
        """Content with markup stripped."""
        return html_to_text(self.content or "")

    @property
    def char_count(self) -> int:
        return len(self.plain_text)

    def preview(self, length: int = 200) -> str:
        """First ``length`` characters of the plain text."""
        return self.plain_text[:length]

    def soft_delete(self) -> None:
        self.deleted_at = utcnow()

    def restore(self) -> None:
        self.deleted_at = None


# Ensure relationship collections are initialized to avoid implicit lazy loads
@event.listens_for(Note, "init", propagate=True)
def _init_note_collections(target, args, kwargs):
    if "tags" not in kwargs:
        orm_attributes.set_committed_value(target, "tags", [])
