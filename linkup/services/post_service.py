"""Business logic for posts and the denormalized feed reads."""
from __future__ import annotations

import logging
from typing import Any, cast
from uuid import UUID

from sqlalchemy import Select, delete, func, select
from sqlalchemy.orm import Session

from ..models import Comment, Post, PostLike, User
from .errors import NotFoundError, OwnershipError, ValidationError
from .pagination import apply_keyset, normalize_limit, split_page
from .persistence import commit
from .text_search import LIKE_ESCAPE, contains_pattern
from .user_mapper import map_author

logger = logging.getLogger(__name__)


def _feed_statement(viewer_id: UUID | None) -> Select[Any]:
    likes_count = (
        select(func.count(PostLike.id)).where(PostLike.post_id == Post.id).scalar_subquery()
    )
    statement = select(Post, User, likes_count.label("likes_count")).join(User, Post.user_id == User.id)
    if viewer_id is not None:
        viewer_like = (
            select(func.count(PostLike.id))
            .where(PostLike.post_id == Post.id, PostLike.user_id == viewer_id)
            .scalar_subquery()
        )
        statement = statement.add_columns(viewer_like.label("viewer_like"))
    return statement


def _post_record(post: Post, author: User | None, likes_count: int, is_liked: bool) -> dict[str, Any]:
    return {
        "id": post.id,
        "user_id": post.user_id,
        "content": post.content,
        "image_url": post.image_url,
        "video_url": post.video_url,
        "likes_count": int(likes_count or 0),
        "comments_count": int(post.comments_count or 0),
        "created_at": post.created_at,
        "updated_at": post.updated_at,
        "user": map_author(author) if author is not None else None,
        "is_liked": bool(is_liked),
    }


def _rows_to_records(rows, viewer_id: UUID | None) -> list[dict[str, Any]]:
    records: list[dict[str, Any]] = []
    for row in rows:
        post, author, likes_count = row[0], row[1], row[2]
        viewer_like = row[3] if viewer_id is not None else 0
        records.append(_post_record(post, author, likes_count, bool(viewer_like)))
    return records


def list_posts(
    db: Session,
    *,
    viewer_id: UUID | None = None,
    limit: int | None = None,
    cursor: str | None = None,
    author_id: UUID | None = None,
) -> tuple[list[dict[str, Any]], str | None]:
    """Return posts newest first with author, like count and viewer like flag.

    Without ``limit`` the whole collection is returned. With ``limit`` the
    second element of the result is the cursor for the following page.
    """

    page_size = normalize_limit(limit)
    statement = _feed_statement(viewer_id)
    if author_id is not None:
        statement = statement.where(Post.user_id == author_id)
    statement = apply_keyset(statement, Post.created_at, Post.id, cursor)
    statement = statement.order_by(Post.created_at.desc(), Post.id.desc())
    if page_size is not None:
        statement = statement.limit(page_size + 1)

    rows = db.execute(statement).all()
    page, next_cursor = split_page(rows, page_size, key=lambda row: (row[0].created_at, row[0].id))
    return _rows_to_records(page, viewer_id), next_cursor


def list_user_posts(db: Session, *, author_id: UUID, viewer_id: UUID | None = None) -> list[dict[str, Any]]:
    records, _ = list_posts(db, viewer_id=viewer_id, author_id=author_id)
    return records


def get_post(db: Session, *, post_id: UUID, viewer_id: UUID | None = None) -> dict[str, Any]:
    statement = _feed_statement(viewer_id).where(Post.id == post_id)
    row = db.execute(statement).first()
    if row is None:
        raise NotFoundError("Post not found")
    return _rows_to_records([row], viewer_id)[0]


def create_post(
    db: Session,
    *,
    author_id: UUID | None,
    content: str | None,
    image_url: str | None = None,
    video_url: str | None = None,
) -> dict[str, Any]:
    """Persist a new post with an empty liker set and zero comments."""

    if author_id is None or content is None:
        raise ValidationError("author_id and content are required")

    author = db.get(User, author_id)
    if author is None:
        raise NotFoundError("User not found")

    post = Post(
        user_id=author_id,
        content=content,
        image_url=image_url or None,
        video_url=video_url or None,
        comments_count=0,
    )
    db.add(post)
    commit(db, action="create post")
    db.refresh(post)
    return _post_record(post, author, 0, False)


def delete_post(
    db: Session,
    *,
    post_id: UUID,
    requester_id: UUID,
    allow_any: bool = False,
) -> bool:
    """Delete a post and every comment and like attached to it.

    Only the author may delete unless ``allow_any`` is set by the moderation
    path. The cascade runs in the same transaction as the post delete, so a
    post that is not removed keeps all of its comments.
    """

    post = db.get(Post, post_id)
    if post is None:
        raise NotFoundError("Post not found")
    if cast(UUID, post.user_id) != requester_id and not allow_any:
        raise OwnershipError("Post not found")

    conditions = [Post.id == post_id]
    if not allow_any:
        conditions.append(Post.user_id == requester_id)

    db.execute(delete(Comment).where(Comment.post_id == post_id))
    db.execute(delete(PostLike).where(PostLike.post_id == post_id))
    result = db.execute(delete(Post).where(*conditions))
    if result.rowcount == 0:
        # Lost a race with another delete; undo the cascade as well.
        db.rollback()
        return False
    commit(db, action="delete post")
    logger.info("Post %s deleted by %s", post_id, requester_id)
    return True


def search_posts(db: Session, *, query: str, viewer_id: UUID | None = None, limit: int = 20) -> list[dict[str, Any]]:
    text = (query or "").strip()
    if not text:
        return []
    statement = (
        _feed_statement(viewer_id)
        .where(func.lower(Post.content).like(contains_pattern(text), escape=LIKE_ESCAPE))
        .order_by(Post.created_at.desc(), Post.id.desc())
        .limit(max(1, limit))
    )
    return _rows_to_records(db.execute(statement).all(), viewer_id)


__all__ = [
    "list_posts",
    "list_user_posts",
    "get_post",
    "create_post",
    "delete_post",
    "search_posts",
]
