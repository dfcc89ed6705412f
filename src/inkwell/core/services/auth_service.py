"""Authentication service implementation."""

from datetime import datetime, timezone
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ...security import (
    blacklist_token,
    create_access_token,
    create_refresh_token,
    hash_password,
    needs_update,
    verify_password,
)
from ..logging import get_logger
from ..models.refresh_token import RefreshToken
from ..models.user import User
from ..redis_client import get_redis_client
from ..repositories.refresh_token_repository import RefreshTokenRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import (
    LoginRequest,
    PasswordChangeRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from .interfaces import IAuthService

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.token_repo = RefreshTokenRepository(session)
        self.redis = get_redis_client()
        self.settings = get_settings()

    @staticmethod
    def _invalid_credentials() -> HTTPException:
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    @staticmethod
    def _user_response(user: User, notes_count=None) -> UserResponse:
        return UserResponse(
            id=user.id,
            username=user.username,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
            notes_count=notes_count,
        )

    async def _issue_tokens(self, user: User) -> TokenResponse:
        """Mint an access token and store a fresh refresh token."""
        access_token = create_access_token(data={"sub": str(user.id)})
        refresh_token = create_refresh_token()

        await self.token_repo.issue(
            user.id,
            refresh_token,
            RefreshToken.expiry_from_now(self.settings.refresh_token_expire_days),
        )

        await self.redis.cache_user_session(
            user.id,
            {
                "user_id": str(user.id),
                "username": user.username,
                "login_time": datetime.now(timezone.utc).isoformat(),
            },
            expire=self.settings.refresh_token_expire_days * 24 * 3600,
        )

        return TokenResponse(
            access_token=access_token,
            refresh_token=refresh_token,
            token_type="bearer",
            expires_in=self.settings.access_token_expire_minutes * 60,
            user=self._user_response(user),
        )

    async def register_user(self, request: RegisterRequest) -> TokenResponse:
        """Register new user and log them in."""
        if await self.user_repo.is_username_taken(request.username):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Username already taken"
            )

        user = await self.user_repo.create_user(
            {
                "username": request.username,
                "password_hash": hash_password(request.password),
                "is_active": True,
            }
        )
        logger.info(f"Registered user {user.id}")

        return await self._issue_tokens(user)

    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return JWT tokens."""
        user = await self.user_repo.get_by_username(request.username)
        if not user or not user.can_login():
            raise self._invalid_credentials()

        if not verify_password(request.password, user.password_hash):
            logger.warning(f"Failed login for user {user.id}")
            raise self._invalid_credentials()

        if needs_update(user.password_hash):
            user = await self.user_repo.update_user(
                user.id, {"password_hash": hash_password(request.password)}
            )

        return await self._issue_tokens(user)

    async def refresh_token(self, request: RefreshTokenRequest) -> TokenResponse:
        """Rotate the refresh token and issue a new access token."""
        # consumed even when the user turns out to be inactive
        user_id = await self.token_repo.consume(request.refresh_token)
        if not user_id:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid refresh token"
            )

        user = await self.user_repo.get_by_id(user_id)
        if not user or not user.can_login():
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="User account inactive"
            )

        return await self._issue_tokens(user)

    async def get_current_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        notes_count = await self.user_repo.count_notes(user_id)
        return self._user_response(user, notes_count=notes_count)

    async def change_password(self, user_id: UUID, request: PasswordChangeRequest) -> bool:
        """Change user password."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

        if not verify_password(request.current_password, user.password_hash):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Current password is incorrect"
            )

        await self.user_repo.update_user(user_id, {"password_hash": hash_password(request.new_password)})

        # every other device has to log in again
        await self.token_repo.revoke_all(user_id)
        logger.info(f"Password changed for user {user_id}")
        return True

    async def logout_user(self, user_id: UUID, access_token: str) -> bool:
        """Logout user: blacklist the access token and drop refresh tokens."""
        await blacklist_token(access_token)
        deleted_count = await self.token_repo.revoke_all(user_id)
        await self.redis.invalidate_user_session(user_id)
        logger.info(f"Logged out user {user_id}")
        return deleted_count > 0
