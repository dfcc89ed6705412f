"""Unit tests for security/jwt.py"""

import uuid
from datetime import timedelta

import pytest
from jose import jwt

from inkwell.security import jwt as jwt_module
from inkwell.security.jwt import (
    blacklist_token,
    create_access_token,
    create_refresh_token,
    decode_access_token,
    get_user_id_from_token,
)


class DummySettings:
    secret_key = "test-secret"
    algorithm = "HS256"
    access_token_expire_minutes = 30


class MockRedis:
    def __init__(self, blacklisted=()):
        self.blacklisted = set(blacklisted)
        self.added = {}

    async def is_token_blacklisted(self, jti):
        return jti in self.blacklisted

    async def add_to_blacklist(self, jti, expire):
        self.added[jti] = expire
        return True


@pytest.fixture
def redis_mock(monkeypatch):
    mock = MockRedis()
    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())
    monkeypatch.setattr(jwt_module, "get_redis_client", lambda: mock)
    return mock


async def test_create_and_decode_access_token(redis_mock):
    sub = str(uuid.uuid4())
    token = create_access_token({"sub": sub}, expires_delta=timedelta(minutes=5))

    payload = await decode_access_token(token)

    assert payload["sub"] == sub
    assert payload["type"] == "access"
    assert payload["jti"]


async def test_each_token_gets_its_own_jti(redis_mock):
    first = jwt.get_unverified_claims(create_access_token({"sub": "x"}))
    second = jwt.get_unverified_claims(create_access_token({"sub": "x"}))
    assert first["jti"] != second["jti"]


async def test_decode_rejects_bad_signature(redis_mock):
    token = jwt.encode({"sub": "x", "type": "access"}, "other-secret", algorithm="HS256")
    assert await decode_access_token(token) is None


async def test_decode_rejects_expired_token(redis_mock):
    token = create_access_token({"sub": "x"}, expires_delta=timedelta(seconds=-1))
    assert await decode_access_token(token) is None


async def test_decode_rejects_wrong_token_type(redis_mock):
    token = jwt.encode({"sub": "x", "type": "refresh"}, DummySettings.secret_key, algorithm="HS256")
    assert await decode_access_token(token) is None


async def test_decode_rejects_blacklisted_token(redis_mock):
    token = create_access_token({"sub": str(uuid.uuid4())})
    redis_mock.blacklisted.add(jwt.get_unverified_claims(token)["jti"])
    assert await decode_access_token(token) is None


async def test_get_user_id_from_token(redis_mock):
    uid = uuid.uuid4()
    assert await get_user_id_from_token(create_access_token({"sub": str(uid)})) == uid
    assert await get_user_id_from_token(create_access_token({"sub": "not-a-uuid"})) is None
    assert await get_user_id_from_token(create_access_token({})) is None
    assert await get_user_id_from_token("garbage") is None


async def test_blacklist_token_uses_remaining_lifetime(redis_mock):
    token = create_access_token({"sub": "x"}, expires_delta=timedelta(minutes=10))
    assert await blacklist_token(token) is True

    jti = jwt.get_unverified_claims(token)["jti"]
    assert 0 < redis_mock.added[jti] <= 600


async def test_blacklist_token_ignores_invalid_token(redis_mock):
    assert await blacklist_token("garbage") is False
    assert redis_mock.added == {}


def test_refresh_tokens_are_random():
    assert create_refresh_token() != create_refresh_token()
    assert len(create_refresh_token()) >= 40
