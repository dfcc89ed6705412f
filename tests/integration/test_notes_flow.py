"""Note CRUD, listing, search and the trash over HTTP."""

import uuid
from datetime import datetime, timedelta


async def test_create_and_read(client, auth_headers, create_note):
    note = await create_note(title="Reading list", content="<h2>Autumn</h2><p>Sebald</p>")
    assert note["char_count"] == len("Autumn Sebald")
    assert note["locked"] is False
    assert note["deleted_at"] is None

    resp = await client.get(f"/api/notes/{note['id']}", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["content"] == "<h2>Autumn</h2><p>Sebald</p>"


async def test_empty_note_defaults(client, auth_headers):
    resp = await client.post("/api/notes", json={}, headers=auth_headers)
    assert resp.status_code == 201
    assert resp.json()["title"] == ""
    assert resp.json()["pinned"] is False


async def test_notes_are_private(client, auth_headers, other_headers, create_note):
    note = await create_note()
    assert (await client.get(f"/api/notes/{note['id']}", headers=other_headers)).status_code == 404
    resp = await client.patch(
        f"/api/notes/{note['id']}", json={"title": "mine now"}, headers=other_headers
    )
    assert resp.status_code == 404
    assert (await client.delete(f"/api/notes/{note['id']}", headers=other_headers)).status_code == 404
    assert (await client.get("/api/notes", headers=other_headers)).json()["total"] == 0


async def test_missing_note(client, auth_headers):
    resp = await client.get(f"/api/notes/{uuid.uuid4()}", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Note not found"


async def test_list_puts_pinned_first_then_recent(client, auth_headers, create_note):
    older = await create_note(title="older")
    await create_note(title="newer")
    pinned = await create_note(title="pinned")
    await client.patch(f"/api/notes/{pinned['id']}", json={"pinned": True}, headers=auth_headers)
    await client.patch(f"/api/notes/{older['id']}", json={"title": "older, edited"}, headers=auth_headers)

    body = (await client.get("/api/notes", headers=auth_headers)).json()
    assert [n["title"] for n in body["items"]] == ["pinned", "older, edited", "newer"]
    assert body["total"] == 3


async def test_list_items_carry_plain_previews(client, auth_headers, create_note):
    await create_note(title="long", content="<p>" + "word " * 100 + "</p>")
    item = (await client.get("/api/notes", headers=auth_headers)).json()["items"][0]
    assert "<p>" not in item["content_preview"]
    assert item["content_preview"].startswith("word word")
    assert len(item["content_preview"]) == 200
    assert "content" not in item


async def test_pagination(client, auth_headers, create_note):
    for i in range(5):
        await create_note(title=f"n{i}")

    body = (await client.get("/api/notes?page=2&per_page=2", headers=auth_headers)).json()
    assert len(body["items"]) == 2
    assert body["pages"] == 3
    assert body["has_next"] is True
    assert body["has_prev"] is True

    resp = await client.get("/api/notes?per_page=0", headers=auth_headers)
    assert resp.status_code == 422


async def test_search_title_body_and_tags(client, auth_headers, create_note):
    await create_note(title="Groceries", content="<p>eggs</p>")
    await create_note(title="Poems", content="<p>the egg of night</p>")
    tagged = await create_note(title="Misc", content="<p>nothing</p>")
    tag = (await client.post("/api/tags", json={"name": "eggplant"}, headers=auth_headers)).json()
    await client.put(
        f"/api/notes/{tagged['id']}/tags", json={"tag_ids": [tag["id"]]}, headers=auth_headers
    )

    body = (await client.get("/api/notes?q=EGG", headers=auth_headers)).json()
    assert {n["title"] for n in body["items"]} == {"Groceries", "Poems", "Misc"}

    body = (await client.get("/api/notes?q=groc", headers=auth_headers)).json()
    assert [n["title"] for n in body["items"]] == ["Groceries"]

    body = (await client.get("/api/notes?q=100%25", headers=auth_headers)).json()
    assert body["total"] == 0


async def test_update_to_unknown_folder(client, auth_headers, create_note):
    note = await create_note()
    resp = await client.patch(
        f"/api/notes/{note['id']}", json={"folder_id": str(uuid.uuid4())}, headers=auth_headers
    )
    assert resp.status_code == 400


async def test_trash_restore_and_purge(client, auth_headers, create_note):
    keep = await create_note(title="keep")
    bin1 = await create_note(title="bin one")
    bin2 = await create_note(title="bin two")

    for note in (bin1, bin2):
        resp = await client.delete(f"/api/notes/{note['id']}", headers=auth_headers)
        assert resp.status_code == 204

    live = (await client.get("/api/notes", headers=auth_headers)).json()
    assert [n["title"] for n in live["items"]] == ["keep"]

    trash = (await client.get("/api/notes/trash", headers=auth_headers)).json()
    assert [n["title"] for n in trash["items"]] == ["bin two", "bin one"]

    # trashed notes can still be opened
    resp = await client.get(f"/api/notes/{bin1['id']}", headers=auth_headers)
    assert resp.json()["deleted_at"] is not None

    resp = await client.post(f"/api/notes/{bin1['id']}/restore", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["deleted_at"] is None

    resp = await client.delete("/api/notes/trash", headers=auth_headers)
    assert resp.json() == {"deleted": 1}
    assert (await client.get(f"/api/notes/{bin2['id']}", headers=auth_headers)).status_code == 404

    resp = await client.delete(f"/api/notes/{keep['id']}/permanent", headers=auth_headers)
    assert resp.status_code == 204
    assert (await client.get(f"/api/notes/{keep['id']}", headers=auth_headers)).status_code == 404

    live = (await client.get("/api/notes", headers=auth_headers)).json()
    assert [n["title"] for n in live["items"]] == ["bin one"]


async def test_timestamps_are_returned_in_utc(client, auth_headers, create_note):
    note = await create_note(title="stamped")
    resp = await client.get(f"/api/notes/{note['id']}", headers=auth_headers)
    body = resp.json()
    for field in ("created_at", "updated_at"):
        stamp = datetime.fromisoformat(body[field].replace("Z", "+00:00"))
        assert stamp.utcoffset() == timedelta(0)

    assert (await client.delete(f"/api/notes/{note['id']}", headers=auth_headers)).status_code == 204
    trashed = (await client.get(f"/api/notes/{note['id']}", headers=auth_headers)).json()
    assert datetime.fromisoformat(trashed["deleted_at"].replace("Z", "+00:00")).utcoffset() == timedelta(0)
