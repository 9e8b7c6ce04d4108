"""Profile reads and writes for application users."""
from __future__ import annotations

from typing import Any
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from ..constants import DEFAULT_ROLE, DEFAULT_STATUS
from ..models import User
from .errors import NotFoundError
from .persistence import commit
from .text_search import LIKE_ESCAPE, contains_pattern
from .user_mapper import map_user

_EDITABLE_FIELDS = {
    "first_name",
    "last_name",
    "profile_image_url",
    "bio",
    "title",
    "address",
    "gender",
    "date_of_birth",
    "phone_number",
    "other_links",
}


def get_user_row(db: Session, user_id: UUID) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_user(db: Session, *, user_id: UUID) -> dict[str, Any]:
    return map_user(get_user_row(db, user_id))


def upsert_user(db: Session, *, user_id: UUID, **fields: Any) -> dict[str, Any]:
    """Create the profile row on first sync or overwrite the supplied fields.

    ``created_at`` of an existing row is preserved; missing role and status
    are filled with their defaults.
    """

    user = db.get(User, user_id)
    if user is None:
        user = User(id=user_id)
        db.add(user)

    for field, value in fields.items():
        if field in _EDITABLE_FIELDS or field in {"email", "role", "status"}:
            setattr(user, field, value)
    if not user.role:
        user.role = DEFAULT_ROLE
    if not user.status:
        user.status = DEFAULT_STATUS

    commit(db, action="save user")
    db.refresh(user)
    return map_user(user)


def update_profile(db: Session, *, user_id: UUID, changes: dict[str, Any]) -> dict[str, Any]:
    """Apply profile edits; only fields the client actually sent are touched."""

    user = get_user_row(db, user_id)
    for field, value in changes.items():
        if field not in _EDITABLE_FIELDS:
            continue
        if field == "other_links" and value is not None:
            value = [str(link) for link in value]
        setattr(user, field, value)

    commit(db, action="update profile")
    db.refresh(user)
    return map_user(user)


def search_users(db: Session, *, query: str, limit: int = 20) -> list[dict[str, Any]]:
    text = (query or "").strip().lower()
    if not text:
        return []
    pattern = contains_pattern(text)
    full_name = func.lower(func.coalesce(User.first_name, "") + " " + func.coalesce(User.last_name, ""))
    stmt = (
        select(User)
        .where(
            or_(
                func.lower(User.first_name).like(pattern, escape=LIKE_ESCAPE),
                func.lower(User.last_name).like(pattern, escape=LIKE_ESCAPE),
                func.lower(User.email).like(pattern, escape=LIKE_ESCAPE),
                full_name.like(pattern, escape=LIKE_ESCAPE),
            )
        )
        .order_by(User.created_at.desc())
        .limit(max(1, limit))
    )
    return [map_user(user) for user in db.scalars(stmt)]


__all__ = ["get_user_row", "get_user", "upsert_user", "update_profile", "search_users"]
