"""Tests for translating stored user rows into the public user shape."""
from __future__ import annotations

from uuid import uuid4

from linkup.models import User
from linkup.services import map_author, map_user


def test_mapping_with_legacy_id_gets_default_role_and_status():
    raw_id = uuid4()
    mapped = map_user({"_id": str(raw_id), "first_name": "Ada", "email": "ada@example.com"})

    assert mapped["id"] == raw_id
    assert mapped["first_name"] == "Ada"
    assert mapped["role"] == "user"
    assert mapped["status"] == "active"
    assert mapped["other_links"] == []
    assert mapped["bio"] is None


def test_orm_user_keeps_explicit_role_and_links():
    user = User(id=uuid4(), first_name="Grace", role="admin", status="suspended", other_links=["https://a.example"])

    mapped = map_user(user)

    assert mapped["id"] == user.id
    assert mapped["role"] == "admin"
    assert mapped["status"] == "suspended"
    assert mapped["other_links"] == ["https://a.example"]


def test_unparseable_id_is_passed_through():
    assert map_user({"id": "not-a-uuid"})["id"] == "not-a-uuid"


def test_author_projection_is_trimmed():
    user = User(id=uuid4(), first_name="Linus", last_name="T", email="linus@example.com", bio="kernel")

    author = map_author(user)

    assert set(author) == {"id", "first_name", "last_name", "profile_image_url", "title", "role"}
    assert author["role"] == "user"
