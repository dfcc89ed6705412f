# Main application entry point
import os
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from redis.exceptions import RedisError

from .api import (
    auth_router,
    comments_router,
    folders_router,
    health_router,
    locks_router,
    notes_router,
    tags_router,
    uploads_router,
)
from .config import get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .core.redis_client import get_redis_client
from .database import create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting Inkwell application",
        extra={
            "version": settings.app_version,
            "environment": settings.environment,
            "debug": settings.debug,
        },
    )

    redis_client = get_redis_client()
    try:
        await redis_client.connect()
    except (RedisError, OSError) as e:
        logger.warning(f"Redis connection failed: {e}. Continuing without Redis...")

    # tests build their own schema on an in-memory database
    if os.getenv("INKWELL_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to INKWELL_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down Inkwell application")
    await redis_client.disconnect()


app = FastAPI(
    title=settings.app_name,
    description="Personal notes with folders, tags, version history and locks",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router, prefix="/api")
app.include_router(folders_router, prefix="/api")
app.include_router(tags_router, prefix="/api")
app.include_router(notes_router, prefix="/api")
app.include_router(locks_router, prefix="/api")
app.include_router(comments_router, prefix="/api")
app.include_router(uploads_router, prefix="/api")
app.include_router(health_router, prefix="/api")

# uploaded media, served as-is
Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)
app.mount(settings.upload_url_prefix, StaticFiles(directory=settings.upload_dir), name="uploads")


@app.get("/")
async def root():
    return {"message": "Inkwell API"}


@app.get("/api")
async def api_root():
    return {
        "message": "Inkwell API",
        "version": settings.app_version,
        "documentation": {
            "swagger_ui": "/docs",
            "redoc": "/redoc",
            "openapi_json": "/openapi.json",
        },
        "endpoints": {
            "authentication": "/api/auth",
            "folders": "/api/folders",
            "tags": "/api/tags",
            "notes": "/api/notes",
            "comments": "/api/comments",
            "upload": "/api/upload",
            "health": "/api/health",
        },
    }


# Basic unprefixed health endpoint for load balancers
@app.get("/health")
async def basic_health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("inkwell.main:app", host=settings.host, port=settings.port, reload=settings.reload)
