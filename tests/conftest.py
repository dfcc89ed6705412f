"""Shared pytest fixtures: SQLite in-memory database and an ASGI test client."""

import logging
import os
import tempfile
from uuid import uuid4

# must be set before inkwell.config builds its Settings instance
_TMP = tempfile.mkdtemp(prefix="inkwell-tests-")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["UPLOAD_DIR"] = os.path.join(_TMP, "uploads")
os.environ["LOG_DIR"] = os.path.join(_TMP, "logs")
os.environ["INKWELL_SKIP_LIFESPAN_DB"] = "1"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from inkwell.core.models.base import BaseModel  # noqa: E402
from inkwell.database import get_db_session  # noqa: E402
from inkwell.main import app  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
async def test_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )

    # CASCADE / SET NULL only work with foreign keys switched on
    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    """Session for arranging and inspecting data directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """HTTP client against the app; every request gets its own session."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def user_credentials():
    return {"username": f"writer_{uuid4().hex[:8]}", "password": "quill-and-ink"}


@pytest.fixture
async def auth_tokens(client, user_credentials):
    """Register a user through the API and return the token response."""
    resp = await client.post("/api/auth/register", json=user_credentials)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.fixture
def auth_headers(auth_tokens):
    return {"Authorization": f"Bearer {auth_tokens['access_token']}"}


@pytest.fixture
async def other_headers(client):
    """A second, unrelated user."""
    resp = await client.post(
        "/api/auth/register",
        json={"username": f"other_{uuid4().hex[:8]}", "password": "not-your-notes"},
    )
    assert resp.status_code == 201, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
def create_note(client, auth_headers):
    """Factory creating notes for the default user."""

    async def _create(title="Draft", content="<p>Hello</p>", **extra):
        resp = await client.post(
            "/api/notes",
            json={"title": title, "content": content, **extra},
            headers=auth_headers,
        )
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _create


class FakeRedis:
    """In-memory stand-in for the redis.asyncio client."""

    def __init__(self):
        self.storage = {}
        self.ttl = {}

    async def get(self, key):
        return self.storage.get(key)

    async def set(self, key, value):
        self.storage[key] = value
        return True

    async def setex(self, key, expire, value):
        self.storage[key] = value
        self.ttl[key] = expire
        return True

    async def delete(self, key):
        return 1 if self.storage.pop(key, None) is not None else 0

    async def exists(self, key):
        return 1 if key in self.storage else 0

    async def ping(self):
        return True

    async def aclose(self):
        pass


@pytest.fixture
def fake_redis(monkeypatch):
    """Attach a FakeRedis to the shared RedisClient for one test."""
    from inkwell.core.redis_client import get_redis_client

    fake = FakeRedis()
    monkeypatch.setattr(get_redis_client(), "redis", fake)
    return fake
