"""Health service implementation."""

import time
from datetime import datetime, timezone
from typing import Any, Dict

from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import get_settings
from ..logging import get_logger
from ..redis_client import get_redis_client
from ..schemas.common import HealthCheckResponse
from .interfaces import IHealthService

logger = get_logger("services.health")


class HealthService(IHealthService):
    """Health check service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.settings = get_settings()

    async def get_health_status(self) -> HealthCheckResponse:
        """Overall status is unhealthy only when the database is down; Redis is optional."""
        db_health = await self.check_database_health()
        redis_health = await self.check_redis_health()

        if not db_health["connected"]:
            overall_status = "unhealthy"
        elif not redis_health["connected"]:
            overall_status = "degraded"
        else:
            overall_status = "healthy"

        return HealthCheckResponse(
            status=overall_status,
            timestamp=datetime.now(timezone.utc),
            version=self.settings.app_version,
            checks={"database": db_health, "redis": redis_health},
        )

    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        started = time.perf_counter()
        try:
            result = await self.session.execute(text("SELECT 1"))
            result.scalar()
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Database health check failed: {e}")
            return {"connected": False, "status": "unhealthy", "error": str(e), "response_time_ms": None}

        return {
            "connected": True,
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - started) * 1000, 2),
        }

    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis through the shared client."""
        client = get_redis_client()
        if not client.is_connected:
            return {"connected": False, "status": "unavailable", "response_time_ms": None}

        started = time.perf_counter()
        try:
            await client.ping()
        except (RedisError, OSError) as e:
            logger.error(f"Redis health check failed: {e}")
            return {"connected": False, "status": "unhealthy", "error": str(e), "response_time_ms": None}

        return {
            "connected": True,
            "status": "healthy",
            "response_time_ms": round((time.perf_counter() - started) * 1000, 2),
        }
