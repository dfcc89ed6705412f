"""
Unit tests for User, RefreshToken, Tag, Folder and BaseModel helpers.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from inkwell.core.models.base import as_utc, utcnow
from inkwell.core.models.folder import DEFAULT_FOLDER_COLOR, Folder
from inkwell.core.models.refresh_token import RefreshToken
from inkwell.core.models.tag import Tag
from inkwell.core.models.user import User


def test_utcnow_is_timezone_aware():
    assert utcnow().tzinfo is not None


def test_as_utc_handles_naive_values():
    naive = datetime(2026, 1, 2, 3, 4, 5)
    assert as_utc(naive).tzinfo == timezone.utc
    aware = datetime(2026, 1, 2, tzinfo=timezone.utc)
    assert as_utc(aware) is aware


def test_user_can_login_follows_is_active():
    assert User(username="a", password_hash="h", is_active=True).can_login()
    assert not User(username="a", password_hash="h", is_active=False).can_login()


class TestRefreshToken:
    def _token(self, **kwargs):
        defaults = {
            "token": "abc",
            "user_id": uuid.uuid4(),
            "is_active": True,
            "expires_at": RefreshToken.expiry_from_now(7),
        }
        defaults.update(kwargs)
        return RefreshToken(**defaults)

    def test_fresh_token_is_valid(self):
        token = self._token()
        assert token.is_expired is False
        assert token.is_valid is True

    def test_expired_token(self):
        token = self._token(expires_at=datetime.now(timezone.utc) - timedelta(seconds=1))
        assert token.is_expired is True
        assert token.is_valid is False

    def test_naive_expiry_is_read_as_utc(self):
        naive_future = datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(hours=1)
        assert self._token(expires_at=naive_future).is_valid is True

    def test_inactive_token_is_invalid(self):
        token = self._token()
        token.is_active = False
        assert token.is_valid is False


class TestTag:
    def test_normalize_name_trims(self):
        assert Tag.normalize_name("  Reading List ") == "Reading List"

    def test_normalize_name_rejects_blank(self):
        with pytest.raises(ValueError):
            Tag.normalize_name("   ")


async def test_folder_gets_default_color(test_session):
    user = User(username="folder_owner", password_hash="h", is_active=True)
    test_session.add(user)
    await test_session.commit()

    folder = Folder(name="Journal", user_id=user.id)
    test_session.add(folder)
    await test_session.commit()

    assert folder.color == DEFAULT_FOLDER_COLOR
    assert folder.name == "Journal"
