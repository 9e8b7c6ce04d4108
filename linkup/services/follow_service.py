"""Business logic for directed follow edges.

Follower and following counts are always computed with count queries; no
counters are cached, so there is nothing to drift.
"""
from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from ..models import Follow, User
from .errors import NotFoundError
from .persistence import commit


@dataclass(slots=True)
class FollowStats:
    user_id: UUID
    followers_count: int
    following_count: int
    is_following: bool


def _get_user_or_404(db: Session, user_id: UUID) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def _find_edge(db: Session, follower_id: UUID, following_id: UUID) -> Follow | None:
    return db.scalar(
        select(Follow).where(Follow.follower_id == follower_id, Follow.following_id == following_id)
    )


def toggle_follow(db: Session, *, follower_id: UUID, following_id: UUID) -> bool:
    """Create the edge when absent, delete it when present; return the new state.

    Self-follow is not checked here; the HTTP layer rejects it.
    """

    existing = _find_edge(db, follower_id, following_id)
    if existing is not None:
        db.delete(existing)
        commit(db, action="unfollow user")
        return False

    db.add(Follow(follower_id=follower_id, following_id=following_id))
    commit(db, action="follow user")
    return True


def is_following(db: Session, *, follower_id: UUID, following_id: UUID) -> bool:
    return _find_edge(db, follower_id, following_id) is not None


def count_followers(db: Session, *, user_id: UUID) -> int:
    return int(db.scalar(select(func.count()).select_from(Follow).where(Follow.following_id == user_id)) or 0)


def count_following(db: Session, *, user_id: UUID) -> int:
    return int(db.scalar(select(func.count()).select_from(Follow).where(Follow.follower_id == user_id)) or 0)


def get_follow_stats(db: Session, *, user_id: UUID, viewer_id: UUID | None = None) -> FollowStats:
    _get_user_or_404(db, user_id)

    following = False
    if viewer_id is not None:
        following = is_following(db, follower_id=viewer_id, following_id=user_id)

    return FollowStats(
        user_id=user_id,
        followers_count=count_followers(db, user_id=user_id),
        following_count=count_following(db, user_id=user_id),
        is_following=following,
    )


__all__ = [
    "FollowStats",
    "toggle_follow",
    "is_following",
    "count_followers",
    "count_following",
    "get_follow_stats",
]
