"""Redis client for the token blacklist, login sessions and the stats cache."""

import json
from typing import Any, Dict, Optional
from uuid import UUID

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..config import get_settings
from .logging import get_logger

logger = get_logger("redis")


class RedisClient:
    """Thin async wrapper; every call is a logged no-op while disconnected."""

    def __init__(self):
        self.settings = get_settings()
        self.redis: Optional[redis.Redis] = None

    @property
    def is_connected(self) -> bool:
        return self.redis is not None

    async def connect(self) -> None:
        """Connect to Redis."""
        if self.redis is not None:
            return
        client = redis.from_url(
            self.settings.redis_url,
            max_connections=self.settings.redis_max_connections,
            decode_responses=True,
        )
        try:
            await client.ping()
        except (RedisError, OSError) as e:
            await client.aclose()
            logger.error(f"Failed to connect to Redis: {e}")
            raise
        self.redis = client
        logger.info("Connected to Redis successfully")

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def ping(self) -> bool:
        if not self.redis:
            return False
        return await self.redis.ping()

    async def get(self, key: str) -> Optional[str]:
        """Get value from Redis."""
        if not self.redis:
            return None
        try:
            return await self.redis.get(key)
        except RedisError as e:
            logger.error(f"Redis GET error for key {key}: {e}")
            return None

    async def set(self, key: str, value: str, expire: Optional[int] = None) -> bool:
        """Set value in Redis with optional expiration."""
        if not self.redis:
            return False
        try:
            if expire:
                return bool(await self.redis.setex(key, expire, value))
            return bool(await self.redis.set(key, value))
        except RedisError as e:
            logger.error(f"Redis SET error for key {key}: {e}")
            return False

    async def delete(self, key: str) -> bool:
        """Delete key from Redis."""
        if not self.redis:
            return False
        try:
            return await self.redis.delete(key) > 0
        except RedisError as e:
            logger.error(f"Redis DELETE error for key {key}: {e}")
            return False

    async def exists(self, key: str) -> bool:
        """Check if key exists in Redis."""
        if not self.redis:
            return False
        try:
            return await self.redis.exists(key) > 0
        except RedisError as e:
            logger.error(f"Redis EXISTS error for key {key}: {e}")
            return False

    # Login sessions

    async def cache_user_session(
        self, user_id: UUID, session_data: Dict[str, Any], expire: int = 3600
    ) -> bool:
        """Record the latest login of a user."""
        return await self.set(f"session:{user_id}", json.dumps(session_data), expire)

    async def invalidate_user_session(self, user_id: UUID) -> bool:
        return await self.delete(f"session:{user_id}")

    # Token blacklist

    async def add_to_blacklist(self, token_jti: str, expire: int = 900) -> bool:
        """Blacklist an access token until it would have expired anyway."""
        return await self.set(f"blacklist:{token_jti}", "blacklisted", expire)

    async def is_token_blacklisted(self, token_jti: str) -> bool:
        return await self.exists(f"blacklist:{token_jti}")

    # Stats cache

    async def cache_stats(self, user_id: UUID, stats: Dict[str, Any], expire: int) -> bool:
        return await self.set(f"stats:{user_id}", json.dumps(stats), expire)

    async def get_cached_stats(self, user_id: UUID) -> Optional[Dict[str, Any]]:
        cached = await self.get(f"stats:{user_id}")
        return json.loads(cached) if cached else None

    async def invalidate_stats(self, user_id: UUID) -> bool:
        return await self.delete(f"stats:{user_id}")


# Singleton instance
_redis_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """Get Redis client singleton."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient()
    return _redis_client
