"""Schemas for friend requests and friend lists."""
from __future__ import annotations

from typing import Literal
from uuid import UUID

from .base import CamelModel
from .users import UserResponse


class FriendsOverviewResponse(CamelModel):
    friends: list[UserResponse]
    incoming_requests: list[UserResponse]
    outgoing_requests: list[UserResponse]


class FriendActionResponse(CamelModel):
    user_id: UUID
    status: Literal["requested", "accepted", "rejected", "removed", "noop"]


__all__ = ["FriendsOverviewResponse", "FriendActionResponse"]
