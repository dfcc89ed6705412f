"""NoteService against a real in-memory database."""

import uuid
from datetime import datetime, timezone

import pytest
from fastapi import HTTPException

from inkwell.core.models.folder import Folder
from inkwell.core.models.note import Note
from inkwell.core.models.tag import Tag
from inkwell.core.models.user import User
from inkwell.core.schemas.notes import NoteCreate, NoteUpdate
from inkwell.core.services.lock_service import LockService
from inkwell.core.services.note_service import NoteService, note_to_list_item, note_to_response


@pytest.fixture
async def user(test_session):
    user = User(username=f"svc_{uuid.uuid4().hex[:8]}", password_hash="x", is_active=True)
    test_session.add(user)
    await test_session.commit()
    return user


@pytest.fixture
def service(test_session):
    return NoteService(test_session)


class TestMasking:
    def test_locked_note_hides_body(self):
        note = Note(id=uuid.uuid4(), title="Diary", content="<p>secret</p>", user_id=uuid.uuid4())
        note.pinned = False
        note.lock_hash = "hash"
        note.created_at = note.updated_at = datetime.now(timezone.utc)

        masked = note_to_response(note)
        assert masked.locked is True
        assert masked.content == ""
        assert masked.char_count == 0

        revealed = note_to_response(note, reveal=True)
        assert revealed.content == "<p>secret</p>"
        assert revealed.char_count == 6

        item = note_to_list_item(note)
        assert item.content_preview == ""
        assert item.title == "Diary"


async def test_update_snapshots_only_text_changes(service, user):
    created = await service.create_note(user.id, NoteCreate(title="One", content="<p>a</p>"))

    await service.update_note(created.id, user.id, NoteUpdate(pinned=True))
    assert await service.list_versions(created.id, user.id) == []

    await service.update_note(created.id, user.id, NoteUpdate(content="<p>b</p>"))
    versions = await service.list_versions(created.id, user.id)
    assert [v.content for v in versions] == ["<p>a</p>"]

    # same content again is not a change
    await service.update_note(created.id, user.id, NoteUpdate(content="<p>b</p>"))
    assert len(await service.list_versions(created.id, user.id)) == 1


async def test_versions_are_capped(service, user):
    service.settings = service.settings.model_copy(update={"max_versions_per_note": 3})
    created = await service.create_note(user.id, NoteCreate(title="t", content="0"))

    for i in range(1, 6):
        await service.update_note(created.id, user.id, NoteUpdate(content=str(i)))

    versions = await service.list_versions(created.id, user.id)
    assert [v.content for v in versions] == ["4", "3", "2"]


async def test_restore_version_snapshots_current_state(service, user):
    created = await service.create_note(user.id, NoteCreate(title="v1", content="first"))
    await service.update_note(created.id, user.id, NoteUpdate(title="v2", content="second"))

    [old] = await service.list_versions(created.id, user.id)
    restored = await service.restore_version(created.id, old.id, user.id)
    assert (restored.title, restored.content) == ("v1", "first")

    contents = [v.content for v in await service.list_versions(created.id, user.id)]
    assert contents == ["second", "first"]

    with pytest.raises(HTTPException) as exc:
        await service.restore_version(created.id, uuid.uuid4(), user.id)
    assert exc.value.status_code == 404


async def test_versions_of_locked_note_are_refused(service, test_session, user):
    created = await service.create_note(user.id, NoteCreate(title="t", content="c"))
    await LockService(test_session).lock_note(created.id, user.id, "pass")

    with pytest.raises(HTTPException) as exc:
        await service.list_versions(created.id, user.id)
    assert exc.value.status_code == 423


async def test_unknown_folder_and_tag(service, test_session, user):
    with pytest.raises(HTTPException) as exc:
        await service.create_note(user.id, NoteCreate(folder_id=uuid.uuid4()))
    assert exc.value.detail == "Unknown folder"

    created = await service.create_note(user.id, NoteCreate(title="t"))
    with pytest.raises(HTTPException) as exc:
        await service.set_note_tags(created.id, user.id, [uuid.uuid4()])
    assert exc.value.detail == "Unknown tag"


async def test_explicit_null_folder_moves_note_out(service, test_session, user):
    folder = Folder(name="Work", user_id=user.id)
    test_session.add(folder)
    await test_session.commit()

    created = await service.create_note(user.id, NoteCreate(title="t", folder_id=folder.id))
    assert created.folder_id == folder.id

    moved = await service.update_note(created.id, user.id, NoteUpdate(folder_id=None))
    assert moved.folder_id is None


async def test_set_tags_replaces_set(service, test_session, user):
    first = Tag(name="alpha", user_id=user.id)
    second = Tag(name="beta", user_id=user.id)
    test_session.add_all([first, second])
    await test_session.commit()

    created = await service.create_note(user.id, NoteCreate(title="t"))
    res = await service.set_note_tags(created.id, user.id, [first.id, second.id])
    assert {t.name for t in res.tags} == {"alpha", "beta"}

    res = await service.set_note_tags(created.id, user.id, [second.id])
    assert [t.name for t in res.tags] == ["beta"]


async def test_trash_cycle(service, user):
    keep = await service.create_note(user.id, NoteCreate(title="keep"))
    gone = await service.create_note(user.id, NoteCreate(title="gone"))

    await service.delete_note(gone.id, user.id)
    live = await service.list_user_notes(user.id)
    assert [n.title for n in live.items] == ["keep"]

    trash = await service.list_trash(user.id)
    assert [n.title for n in trash.items] == ["gone"]
    assert trash.items[0].deleted_at is not None

    restored = await service.restore_note(gone.id, user.id)
    assert restored.deleted_at is None

    await service.delete_note(gone.id, user.id)
    assert await service.empty_trash(user.id) == 1
    with pytest.raises(HTTPException):
        await service.get_note(gone.id, user.id)
    assert (await service.get_note(keep.id, user.id)).title == "keep"


async def test_other_users_note_is_not_found(service, test_session, user):
    created = await service.create_note(user.id, NoteCreate(title="mine"))
    with pytest.raises(HTTPException) as exc:
        await service.get_note(created.id, uuid.uuid4())
    assert exc.value.status_code == 404


async def test_page_size_is_clamped(service, user):
    res = await service.list_user_notes(user.id, per_page=10_000)
    assert res.per_page == service.settings.max_page_size
