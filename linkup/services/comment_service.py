"""Business logic for post comments and the cached comment counter."""
from __future__ import annotations

import logging
from typing import Any, cast
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from ..models import Comment, Post, User
from .errors import NotFoundError, OwnershipError, ValidationError
from .persistence import commit
from .user_mapper import map_author

logger = logging.getLogger(__name__)


def _comment_record(comment: Comment, author: User | None) -> dict[str, Any]:
    return {
        "id": comment.id,
        "post_id": comment.post_id,
        "user_id": comment.user_id,
        "content": comment.content,
        "created_at": comment.created_at,
        "user": map_author(author) if author is not None else None,
    }


def _require_post(db: Session, post_id: UUID) -> Post:
    post = db.get(Post, post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def list_comments(db: Session, *, post_id: UUID) -> list[dict[str, Any]]:
    _require_post(db, post_id)
    statement = (
        select(Comment, User)
        .join(User, Comment.user_id == User.id)
        .where(Comment.post_id == post_id)
        .order_by(Comment.created_at.desc(), Comment.id.desc())
    )
    return [_comment_record(comment, author) for comment, author in db.execute(statement).all()]


def count_comments(db: Session, *, post_id: UUID) -> int:
    return int(db.scalar(select(func.count(Comment.id)).where(Comment.post_id == post_id)) or 0)


def create_comment(db: Session, *, post_id: UUID, author_id: UUID, content: str) -> dict[str, Any]:
    """Insert a comment and bump the parent counter in one transaction."""

    text = (content or "").strip()
    if not text:
        raise ValidationError("Comment cannot be empty")
    _require_post(db, post_id)
    author = db.get(User, author_id)
    if author is None:
        raise NotFoundError("User not found")

    comment = Comment(post_id=post_id, user_id=author_id, content=text)
    db.add(comment)
    db.execute(
        update(Post)
        .where(Post.id == post_id)
        .values(comments_count=Post.comments_count + 1)
    )
    commit(db, action="add comment")
    db.refresh(comment)
    return _comment_record(comment, author)


def delete_comment(db: Session, *, comment_id: UUID, requester_id: UUID) -> bool:
    """Delete the requester's own comment and decrement the parent counter."""

    comment = db.get(Comment, comment_id)
    if comment is None:
        raise NotFoundError("Comment not found")
    if cast(UUID, comment.user_id) != requester_id:
        raise OwnershipError("Comment not found")

    post_id = cast(UUID, comment.post_id)
    db.delete(comment)
    db.execute(
        update(Post)
        .where(Post.id == post_id, Post.comments_count > 0)
        .values(comments_count=Post.comments_count - 1)
    )
    commit(db, action="delete comment")
    logger.debug("Comment %s removed from post %s", comment_id, post_id)
    return True


__all__ = ["list_comments", "count_comments", "create_comment", "delete_comment"]
