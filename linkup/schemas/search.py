"""Schemas for the combined user/post search."""
from __future__ import annotations

from .base import CamelModel
from .posts import PostResponse
from .users import UserResponse


class SearchResponse(CamelModel):
    query: str
    users: list[UserResponse]
    posts: list[PostResponse]


__all__ = ["SearchResponse"]
