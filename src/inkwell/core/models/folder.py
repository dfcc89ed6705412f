# Folders group notes; a note sits in at most one folder
import uuid

from sqlalchemy import CheckConstraint, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel
from .types import GUID

DEFAULT_FOLDER_COLOR = "#9b8e7e"


class Folder(BaseModel):
    """User-owned folder."""

    __tablename__ = "folders"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    color: Mapped[str] = mapped_column(String(7), default=DEFAULT_FOLDER_COLOR, nullable=False)

    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    __table_args__ = (
        CheckConstraint("length(name) <= 100", name="ck_folders_name_len"),
        CheckConstraint("length(color) <= 7", name="ck_folders_color_len"),
        Index("idx_folders_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Folder(name='{self.name}')>"
