"""Schemas supporting follower APIs."""
from __future__ import annotations

from typing import Literal
from uuid import UUID

from .base import CamelModel


class FollowStatsResponse(CamelModel):
    user_id: UUID
    followers_count: int
    following_count: int
    is_following: bool


class FollowToggleResponse(CamelModel):
    following: bool
    status: Literal["followed", "unfollowed"]


class FollowStatusResponse(CamelModel):
    user_id: UUID
    is_following: bool


__all__ = ["FollowStatsResponse", "FollowToggleResponse", "FollowStatusResponse"]
