"""Schemas describing moderation dashboards."""
from __future__ import annotations

from typing import Literal

from .base import CamelModel
from .posts import PostResponse
from .users import UserResponse


class ModerationStats(CamelModel):
    total_users: int
    active_users: int
    suspended_users: int
    total_posts: int
    total_comments: int
    active_stories: int


class ModerationUserSummary(UserResponse):
    post_count: int = 0


class ModerationUserListResponse(CamelModel):
    items: list[ModerationUserSummary]


class ModerationPostListResponse(CamelModel):
    items: list[PostResponse]
    next_cursor: str | None = None


class UserStatusUpdate(CamelModel):
    status: Literal["active", "suspended", "banned"]


__all__ = [
    "ModerationStats",
    "ModerationUserSummary",
    "ModerationUserListResponse",
    "ModerationPostListResponse",
    "UserStatusUpdate",
]
