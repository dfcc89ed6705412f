"""Authentication dependencies."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..security import get_user_id_from_token


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


class JWTBearer(HTTPBearer):
    """Bearer token authentication resolving to the caller's user ID."""

    def __init__(self):
        # errors are raised here so that every failure is a 401
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> UUID:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials:
            raise _unauthorized("Not authenticated")

        if credentials.scheme.lower() != "bearer":
            raise _unauthorized("Invalid authentication scheme")

        user_id = await get_user_id_from_token(credentials.credentials)
        if not user_id:
            raise _unauthorized("Invalid token or expired token")

        request.state.access_token = credentials.credentials
        return user_id


jwt_bearer = JWTBearer()


async def get_current_user_id(user_id: UUID = Depends(jwt_bearer)) -> UUID:
    """Get current authenticated user ID."""
    return user_id


async def get_access_token(request: Request, user_id: UUID = Depends(jwt_bearer)) -> str:
    """Raw bearer token of an authenticated request, for logout."""
    return request.state.access_token
