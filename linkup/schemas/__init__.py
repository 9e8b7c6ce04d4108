"""Convenience exports for schema layer."""
from .auth import AuthResponse, LoginRequest, SignupRequest
from .base import CamelModel
from .follow import FollowStatsResponse, FollowStatusResponse, FollowToggleResponse
from .friends import FriendActionResponse, FriendsOverviewResponse
from .moderation import (
    ModerationPostListResponse,
    ModerationStats,
    ModerationUserListResponse,
    ModerationUserSummary,
    UserStatusUpdate,
)
from .posts import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    LikeToggleResponse,
    PostCreate,
    PostFeedResponse,
    PostResponse,
)
from .search import SearchResponse
from .stories import StoryCreate, StoryFeedResponse, StoryResponse
from .uploads import UploadResponse
from .users import AuthorSummary, ProfileUpdateRequest, UserProfileResponse, UserResponse

__all__ = [
    "CamelModel",
    "AuthResponse",
    "LoginRequest",
    "SignupRequest",
    "AuthorSummary",
    "UserResponse",
    "UserProfileResponse",
    "ProfileUpdateRequest",
    "FollowStatsResponse",
    "FollowStatusResponse",
    "FollowToggleResponse",
    "FriendActionResponse",
    "FriendsOverviewResponse",
    "PostCreate",
    "PostResponse",
    "PostFeedResponse",
    "LikeToggleResponse",
    "CommentCreate",
    "CommentResponse",
    "CommentListResponse",
    "StoryCreate",
    "StoryResponse",
    "StoryFeedResponse",
    "SearchResponse",
    "UploadResponse",
    "ModerationStats",
    "ModerationUserSummary",
    "ModerationUserListResponse",
    "ModerationPostListResponse",
    "UserStatusUpdate",
]
