"""UserRepository and RefreshTokenRepository on the in-memory database."""

from datetime import timedelta

import pytest

from inkwell.core.models.base import utcnow
from inkwell.core.models.note import Note
from inkwell.core.repositories import RefreshTokenRepository, UserRepository


@pytest.fixture
async def user(test_session):
    return await UserRepository(test_session).create_user(
        {"username": "marginalia", "password_hash": "h", "is_active": True}
    )


async def test_username_lookup(test_session, user):
    repo = UserRepository(test_session)
    assert (await repo.get_by_username("marginalia")).id == user.id
    assert await repo.is_username_taken("marginalia") is True
    assert await repo.is_username_taken("someone-else") is False


async def test_update_user(test_session, user):
    repo = UserRepository(test_session)
    updated = await repo.update_user(user.id, {"password_hash": "new"})
    assert updated.password_hash == "new"


async def test_count_notes_skips_trash(test_session, user):
    trashed = Note(title="old", content="", user_id=user.id)
    trashed.soft_delete()
    test_session.add_all([Note(title="a", content="", user_id=user.id), trashed])
    await test_session.commit()

    assert await UserRepository(test_session).count_notes(user.id) == 1


async def test_consume_is_single_use(test_session, user):
    repo = RefreshTokenRepository(test_session)
    await repo.issue(user.id, "live", utcnow() + timedelta(days=1))

    assert await repo.consume("live") == user.id
    assert await repo.consume("live") is None
    assert await repo.consume("missing") is None


async def test_expired_token_is_consumed_without_a_user(test_session, user):
    repo = RefreshTokenRepository(test_session)
    await repo.issue(user.id, "stale", utcnow() - timedelta(days=1))

    assert await repo.consume("stale") is None
    assert await repo.get_by_token("stale") is None


async def test_issue_drops_expired_tokens(test_session, user):
    repo = RefreshTokenRepository(test_session)
    await repo.issue(user.id, "stale", utcnow() - timedelta(minutes=1))
    await repo.issue(user.id, "fresh", utcnow() + timedelta(days=1))

    assert await repo.get_by_token("stale") is None
    assert await repo.get_by_token("fresh") is not None


async def test_revoke_all(test_session, user):
    repo = RefreshTokenRepository(test_session)
    for name in ("one", "two"):
        await repo.issue(user.id, name, utcnow() + timedelta(days=1))

    assert await repo.revoke_all(user.id) == 2
    assert await repo.consume("one") is None
