"""Refresh token storage. Tokens are opaque and single use."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import and_, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.base import utcnow
from ..models.refresh_token import RefreshToken


class RefreshTokenRepository:
    """Repository for refresh token database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def issue(self, user_id: UUID, token: str, expires_at: datetime) -> RefreshToken:
        """Store a new token; the user's expired tokens are dropped in the same commit."""
        await self.session.execute(
            delete(RefreshToken).where(
                and_(RefreshToken.user_id == user_id, RefreshToken.expires_at < utcnow())
            )
        )
        row = RefreshToken(token=token, user_id=user_id, expires_at=expires_at)
        self.session.add(row)
        await self.session.commit()
        return row

    async def get_by_token(self, token: str) -> Optional[RefreshToken]:
        stmt = select(RefreshToken).where(RefreshToken.token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def consume(self, token: str) -> Optional[UUID]:
        """Delete the token and return its user id, or None if it was unknown or no longer valid."""
        row = await self.get_by_token(token)
        if row is None:
            return None

        user_id = row.user_id if row.is_valid else None
        await self.session.delete(row)
        await self.session.commit()
        return user_id

    async def revoke_all(self, user_id: UUID) -> int:
        """Delete every refresh token of the user."""
        result = await self.session.execute(
            delete(RefreshToken).where(RefreshToken.user_id == user_id)
        )
        await self.session.commit()
        return result.rowcount or 0

