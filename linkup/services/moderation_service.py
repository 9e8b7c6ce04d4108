"""Moderation-specific business logic for the admin dashboard."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from ..constants import MAX_PAGE_LIMIT, USER_STATUSES
from ..models import Comment, Post, Story, User
from .errors import PermissionDeniedError, ValidationError
from .persistence import commit
from .text_search import LIKE_ESCAPE, contains_pattern
from .post_service import list_posts
from .user_mapper import map_user
from .user_service import get_user_row

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AdminStats:
    total_users: int
    active_users: int
    suspended_users: int
    total_posts: int
    total_comments: int
    active_stories: int


def _normalize_pagination(skip: int | None, limit: int | None) -> tuple[int, int]:
    safe_skip = max(0, int(skip or 0))
    safe_limit = max(1, min(int(limit or 25), MAX_PAGE_LIMIT))
    return safe_skip, safe_limit


def load_admin_stats(db: Session) -> AdminStats:
    now = datetime.now(timezone.utc)
    # Legacy rows without a status count as active.
    active_filter = or_(User.status.is_(None), User.status == "active")
    return AdminStats(
        total_users=int(db.scalar(select(func.count(User.id))) or 0),
        active_users=int(db.scalar(select(func.count(User.id)).where(active_filter)) or 0),
        suspended_users=int(db.scalar(select(func.count(User.id)).where(User.status == "suspended")) or 0),
        total_posts=int(db.scalar(select(func.count(Post.id))) or 0),
        total_comments=int(db.scalar(select(func.count(Comment.id))) or 0),
        active_stories=int(db.scalar(select(func.count(Story.id)).where(Story.expires_at > now)) or 0),
    )


def list_users(
    db: Session,
    *,
    skip: int = 0,
    limit: int = 25,
    search: str | None = None,
) -> list[dict[str, Any]]:
    safe_skip, safe_limit = _normalize_pagination(skip, limit)
    post_counts = (
        select(Post.user_id.label("user_id"), func.count(Post.id).label("post_count"))
        .group_by(Post.user_id)
        .subquery()
    )
    stmt = select(User, func.coalesce(post_counts.c.post_count, 0)).outerjoin(
        post_counts, User.id == post_counts.c.user_id
    )
    if search:
        pattern = contains_pattern(search.strip())
        stmt = stmt.where(
            or_(
                func.lower(User.email).like(pattern, escape=LIKE_ESCAPE),
                func.lower(User.first_name).like(pattern, escape=LIKE_ESCAPE),
                func.lower(User.last_name).like(pattern, escape=LIKE_ESCAPE),
            )
        )
    stmt = stmt.order_by(User.created_at.desc()).offset(safe_skip).limit(safe_limit)
    users: list[dict[str, Any]] = []
    for user, post_count in db.execute(stmt).all():
        record = map_user(user)
        record["post_count"] = int(post_count or 0)
        users.append(record)
    return users


def set_user_status(db: Session, *, actor_id: UUID, user_id: UUID, new_status: str) -> dict[str, Any]:
    normalized = (new_status or "").strip().lower()
    if normalized not in USER_STATUSES:
        raise ValidationError(f"Status must be one of: {', '.join(USER_STATUSES)}")
    if actor_id == user_id:
        raise PermissionDeniedError("Admins cannot change their own status")

    user = get_user_row(db, user_id)
    previous = user.status
    user.status = normalized
    commit(db, action="update user status")
    db.refresh(user)
    logger.info("User %s status changed %s -> %s by %s", user_id, previous, normalized, actor_id)
    return map_user(user)


def list_posts_for_review(db: Session, *, limit: int = 25, cursor: str | None = None) -> tuple[list[dict[str, Any]], str | None]:
    return list_posts(db, limit=limit, cursor=cursor)


__all__ = [
    "AdminStats",
    "load_admin_stats",
    "list_users",
    "set_user_status",
    "list_posts_for_review",
]
