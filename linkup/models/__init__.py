"""Convenience exports for ORM models."""
from .follow import Follow
from .friend_request import FriendRequest
from .friendship import Friendship
from .post import Comment, Post, PostLike
from .story import Story
from .user import AuthCredential, User

__all__ = [
    "AuthCredential",
    "Comment",
    "Follow",
    "FriendRequest",
    "Friendship",
    "Post",
    "PostLike",
    "Story",
    "User",
]
