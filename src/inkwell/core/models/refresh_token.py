# JWT refresh tokens
import uuid
from datetime import datetime, timedelta, timezone
from sqlalchemy import Boolean, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel, as_utc, utcnow
from .types import GUID, UTCDateTime


class RefreshToken(BaseModel):
    """Refresh token for JWT auth."""

    __tablename__ = "refresh_tokens"

    token: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID(), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )

    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime(), nullable=False)

    __table_args__ = (
        Index("idx_refresh_tokens_user_id", "user_id"),
        Index("idx_refresh_tokens_expires_at", "expires_at"),
    )

    def __repr__(self) -> str:
        token_preview = f"{self.token[:8]}..." if self.token else "None"
        return f"<RefreshToken(user_id={self.user_id}, token={token_preview}, active={self.is_active})>"

    @classmethod
    def expiry_from_now(cls, days: int) -> datetime:
        return datetime.now(timezone.utc) + timedelta(days=days)

    @property
    def is_expired(self) -> bool:
        """Check if token expired."""
        if self.expires_at is None:
            return True
        return utcnow() > as_utc(self.expires_at)

    @property
    def is_valid(self) -> bool:
        """Check if token is valid."""
        return self.is_active and not self.is_expired
