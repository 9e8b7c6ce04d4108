"""Like toggling for posts.

The liker set is the ``post_likes`` rows of a post; the like count is always
its size and is never stored on the post itself.
"""
from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Post, PostLike
from .errors import NotFoundError, PersistenceError
from .persistence import commit

logger = logging.getLogger(__name__)


def count_likes(db: Session, *, post_id: UUID) -> int:
    return int(db.scalar(select(func.count(PostLike.id)).where(PostLike.post_id == post_id)) or 0)


def is_post_liked(db: Session, *, post_id: UUID, user_id: UUID) -> bool:
    return (
        db.scalar(select(PostLike.id).where(PostLike.post_id == post_id, PostLike.user_id == user_id).limit(1))
        is not None
    )


def toggle_like(db: Session, *, post_id: UUID, user_id: UUID) -> dict[str, Any]:
    """Flip ``user_id``'s membership in the post's liker set.

    The returned ``likes_count`` is computed from the set size read before the
    write, assuming the write succeeds. Concurrent togglers are not serialized.
    """

    if db.get(Post, post_id) is None:
        raise NotFoundError("Post not found")

    likes_before = count_likes(db, post_id=post_id)
    existing = db.scalar(select(PostLike).where(PostLike.post_id == post_id, PostLike.user_id == user_id))

    if existing is not None:
        db.delete(existing)
        commit(db, action="remove like")
        return {"liked": False, "likes_count": max(0, likes_before - 1)}

    db.add(PostLike(post_id=post_id, user_id=user_id))
    try:
        db.commit()
    except IntegrityError:
        # A concurrent toggle already added this member; set-add is idempotent.
        db.rollback()
        logger.info("Duplicate like for post %s by %s ignored", post_id, user_id)
        return {"liked": True, "likes_count": likes_before}
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to add like")
        raise PersistenceError("Unable to add like") from exc
    return {"liked": True, "likes_count": likes_before + 1}


__all__ = ["count_likes", "is_post_liked", "toggle_like"]
