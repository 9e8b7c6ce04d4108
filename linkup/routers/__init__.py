"""Aggregate router exports."""
from .auth import router as auth_router
from .comments import router as comments_router
from .friends import router as friends_router
from .moderation import router as moderation_router
from .posts import router as posts_router
from .search import router as search_router
from .stories import router as stories_router
from .uploads import router as uploads_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "comments_router",
    "friends_router",
    "moderation_router",
    "posts_router",
    "search_router",
    "stories_router",
    "uploads_router",
    "users_router",
]
