"""TagRepository lookups on the in-memory database."""

import uuid

from inkwell.core.models.user import User
from inkwell.core.repositories import TagRepository


async def test_find_by_name_folds_case(test_session):
    user = User(username="tagger", password_hash="h", is_active=True)
    test_session.add(user)
    await test_session.commit()

    repo = TagRepository(test_session)
    tag = await repo.create_tag({"name": "Öl", "user_id": user.id})

    assert (await repo.find_by_name(user.id, "öl")).id == tag.id
    assert (await repo.find_by_name(user.id, "ÖL")).id == tag.id
    assert await repo.find_by_name(user.id, "ol") is None
    assert await repo.find_by_name(uuid.uuid4(), "öl") is None
