"""Pydantic schemas for ephemeral stories."""
from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .base import CamelModel
from .users import AuthorSummary


class StoryCreate(CamelModel):
    content: str | None = Field(default=None, max_length=500)
    image_url: str | None = Field(default=None, max_length=1024)
    video_url: str | None = Field(default=None, max_length=1024)


class StoryResponse(CamelModel):
    id: UUID
    user_id: UUID
    content: str | None = None
    image_url: str | None = None
    video_url: str | None = None
    created_at: datetime
    expires_at: datetime
    user: AuthorSummary | None = None


class StoryFeedResponse(CamelModel):
    items: list[StoryResponse]
    next_cursor: str | None = None


__all__ = ["StoryCreate", "StoryResponse", "StoryFeedResponse"]
