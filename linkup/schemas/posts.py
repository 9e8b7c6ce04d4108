"""Pydantic schemas for posts, comments and likes."""
from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .base import CamelModel
from .users import AuthorSummary


class PostCreate(CamelModel):
    """Payload used by API clients when constructing a post."""

    content: str = Field(default="", max_length=5000)
    image_url: str | None = Field(default=None, max_length=1024)
    video_url: str | None = Field(default=None, max_length=1024)


class PostResponse(CamelModel):
    """Serialized representation of a post as seen by one viewer."""

    id: UUID
    user_id: UUID
    content: str
    image_url: str | None = None
    video_url: str | None = None
    likes_count: int = 0
    comments_count: int = 0
    is_liked: bool = False
    created_at: datetime
    updated_at: datetime | None = None
    user: AuthorSummary | None = None


class PostFeedResponse(CamelModel):
    """Envelope used when returning a collection of posts."""

    items: list[PostResponse]
    next_cursor: str | None = None


class LikeToggleResponse(CamelModel):
    liked: bool
    likes_count: int


class CommentCreate(CamelModel):
    content: str = Field(..., min_length=1, max_length=2000)


class CommentResponse(CamelModel):
    id: UUID
    post_id: UUID
    user_id: UUID
    content: str
    created_at: datetime
    user: AuthorSummary | None = None


class CommentListResponse(CamelModel):
    items: list[CommentResponse]


__all__ = [
    "PostCreate",
    "PostResponse",
    "PostFeedResponse",
    "LikeToggleResponse",
    "CommentCreate",
    "CommentResponse",
    "CommentListResponse",
]
