"""Pydantic schemas for user profiles."""
from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from .base import CamelModel


class AuthorSummary(CamelModel):
    """Public author projection embedded in posts, comments and stories."""

    id: UUID
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    title: str | None = None
    role: str = "user"


class UserResponse(CamelModel):
    id: UUID
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    bio: str | None = None
    title: str | None = None
    address: str | None = None
    gender: str | None = None
    date_of_birth: date | None = None
    phone_number: str | None = None
    other_links: list[str] = Field(default_factory=list)
    role: str = "user"
    status: str = "active"
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProfileUpdateRequest(CamelModel):
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    profile_image_url: str | None = Field(default=None, max_length=1024)
    bio: str | None = Field(default=None, max_length=500)
    title: str | None = Field(default=None, max_length=120)
    address: str | None = Field(default=None, max_length=255)
    gender: str | None = Field(default=None, max_length=32)
    date_of_birth: date | None = None
    phone_number: str | None = Field(default=None, max_length=32)
    other_links: list[str] | None = None


class UserProfileResponse(CamelModel):
    """Profile page payload: the user plus follow statistics."""

    user: UserResponse
    followers_count: int
    following_count: int
    is_following: bool
    friendship: str = "none"


__all__ = ["AuthorSummary", "UserResponse", "ProfileUpdateRequest", "UserProfileResponse"]
