"""User store: first-sync upsert, profile edits and search."""
from __future__ import annotations

from datetime import date
from uuid import uuid4

import pytest

from linkup.services import NotFoundError, get_user, search_users, update_profile, upsert_user


def test_upsert_creates_then_updates_preserving_creation_time(db):
    user_id = uuid4()

    created = upsert_user(db, user_id=user_id, email="new@example.com", first_name="New")
    assert created["role"] == "user"
    assert created["status"] == "active"

    updated = upsert_user(db, user_id=user_id, first_name="Renamed", role="admin")

    assert updated["first_name"] == "Renamed"
    assert updated["email"] == "new@example.com"
    assert updated["role"] == "admin"
    assert updated["created_at"] == created["created_at"]


def test_update_profile_ignores_unknown_fields(db, make_user):
    user = make_user()

    record = update_profile(
        db,
        user_id=user.id,
        changes={"title": "Engineer", "date_of_birth": date(1990, 1, 2), "role": "admin"},
    )

    assert record["title"] == "Engineer"
    assert record["date_of_birth"] == date(1990, 1, 2)
    assert record["role"] == "user"


def test_get_missing_user(db):
    with pytest.raises(NotFoundError):
        get_user(db, user_id=uuid4())


def test_search_matches_full_name(db, make_user):
    make_user(first_name="Ada", last_name="Lovelace")
    make_user(first_name="Alan", last_name="Turing")

    assert [u["last_name"] for u in search_users(db, query="ada love")] == ["Lovelace"]
    assert search_users(db, query="  ") == []


def test_search_treats_wildcards_literally(db, make_user):
    make_user(first_name="Grace", last_name="Hopper")
    odd = make_user(first_name="snake_case", last_name="Fan")

    assert [u["id"] for u in search_users(db, query="_")] == [odd.id]
    assert search_users(db, query="%") == []
    assert search_users(db, query="\\") == []
