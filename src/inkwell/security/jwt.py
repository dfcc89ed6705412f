"""JWT token utilities."""

import secrets
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import get_settings
from ..core.logging import get_logger
from ..core.redis_client import get_redis_client

logger = get_logger("security.jwt")


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token with a JTI for blacklisting."""
    settings = get_settings()
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode.update({"exp": expire, "type": "access", "jti": str(uuid.uuid4())})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def create_refresh_token() -> str:
    """Create a random refresh token."""
    return secrets.token_urlsafe(32)


def _decode(token: str) -> Optional[Dict[str, Any]]:
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None


async def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and validate an access token, honouring the blacklist."""
    payload = _decode(token)
    if not payload or payload.get("type") != "access":
        return None

    jti = payload.get("jti")
    # without Redis the blacklist check reports False
    if jti and await get_redis_client().is_token_blacklisted(jti):
        return None

    return payload


async def get_user_id_from_token(token: str) -> Optional[UUID]:
    """Extract user ID from token."""
    payload = await decode_access_token(token)
    if not payload:
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None

    try:
        return UUID(user_id)
    except ValueError:
        return None


async def blacklist_token(token: str) -> bool:
    """Blacklist an access token for the rest of its lifetime."""
    payload = _decode(token)
    if not payload:
        return False

    jti = payload.get("jti")
    exp = payload.get("exp")
    if not jti or not exp:
        return False

    remaining = int(exp - datetime.now(timezone.utc).timestamp())
    if remaining <= 0:
        return False

    blacklisted = await get_redis_client().add_to_blacklist(jti, remaining)
    if not blacklisted:
        logger.warning("Token could not be blacklisted; Redis unavailable")
    return blacklisted
