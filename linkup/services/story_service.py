"""Business logic for ephemeral stories.

Stories expire ``STORY_TTL`` after creation. Expired rows stay in the table;
the read path filters them out.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, cast
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..constants import STORY_TTL
from ..models import Story, User
from .errors import NotFoundError, OwnershipError, ValidationError
from .pagination import apply_keyset, normalize_limit, split_page
from .persistence import commit
from .user_mapper import map_author


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _story_record(story: Story, author: User | None) -> dict[str, Any]:
    return {
        "id": story.id,
        "user_id": story.user_id,
        "content": story.content,
        "image_url": story.image_url,
        "video_url": story.video_url,
        "created_at": story.created_at,
        "expires_at": story.expires_at,
        "user": map_author(author) if author is not None else None,
    }


def list_stories(
    db: Session,
    *,
    viewer_id: UUID | None = None,
    limit: int | None = None,
    cursor: str | None = None,
    now: datetime | None = None,
) -> tuple[list[dict[str, Any]], str | None]:
    """Return unexpired stories newest first.

    ``viewer_id`` is accepted for parity with the post feed but does not scope
    the result: every active story is visible to everyone.
    """

    page_size = normalize_limit(limit)
    cutoff = now or _now()
    statement = (
        select(Story, User)
        .join(User, Story.user_id == User.id)
        .where(Story.expires_at > cutoff)
    )
    statement = apply_keyset(statement, Story.created_at, Story.id, cursor)
    statement = statement.order_by(Story.created_at.desc(), Story.id.desc())
    if page_size is not None:
        statement = statement.limit(page_size + 1)

    rows = db.execute(statement).all()
    page, next_cursor = split_page(rows, page_size, key=lambda row: (row[0].created_at, row[0].id))
    return [_story_record(story, author) for story, author in page], next_cursor


def create_story(
    db: Session,
    *,
    author_id: UUID,
    content: str | None = None,
    image_url: str | None = None,
    video_url: str | None = None,
) -> dict[str, Any]:
    normalized_content = (content or "").strip() or None
    normalized_image = (image_url or "").strip() or None
    normalized_video = (video_url or "").strip() or None
    if not (normalized_content or normalized_image or normalized_video):
        raise ValidationError("Content, imageUrl, or videoUrl is required")

    author = db.get(User, author_id)
    if author is None:
        raise NotFoundError("User not found")

    created_at = _now()
    story = Story(
        user_id=author_id,
        content=normalized_content,
        image_url=normalized_image,
        video_url=normalized_video,
        created_at=created_at,
        expires_at=created_at + STORY_TTL,
    )
    db.add(story)
    commit(db, action="create story")
    return _story_record(story, author)


def delete_story(db: Session, *, story_id: UUID, requester_id: UUID) -> bool:
    story = db.get(Story, story_id)
    if story is None:
        raise NotFoundError("Story not found")
    if cast(UUID, story.user_id) != requester_id:
        raise OwnershipError("Story not found")
    db.delete(story)
    commit(db, action="delete story")
    return True


__all__ = ["list_stories", "create_story", "delete_story"]
