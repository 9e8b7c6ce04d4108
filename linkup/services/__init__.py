"""Convenience exports for service layer."""
from .auth_service import (
    authenticate_user,
    create_access_token,
    decode_access_token,
    get_current_user,
    get_optional_user,
    login,
    require_roles,
    signup,
)
from .comment_service import count_comments, create_comment, delete_comment, list_comments
from .errors import (
    ConflictError,
    LinkupError,
    NotFoundError,
    OwnershipError,
    PermissionDeniedError,
    PersistenceError,
    TransactionAbortedError,
    ValidationError,
)
from .follow_service import FollowStats, count_followers, count_following, get_follow_stats, is_following, toggle_follow
from .friendship_service import (
    accept_friend_request,
    are_friends,
    get_friendship_state,
    list_friend_requests,
    list_friends,
    list_sent_requests,
    reject_friend_request,
    remove_friend,
    send_friend_request,
)
from .like_service import count_likes, is_post_liked, toggle_like
from .moderation_service import AdminStats, list_posts_for_review, list_users, load_admin_stats, set_user_status
from .post_service import create_post, delete_post, get_post, list_posts, list_user_posts, search_posts
from .story_service import create_story, delete_story, list_stories
from .upload_service import UploadResult, store_upload
from .user_mapper import map_author, map_user
from .user_service import get_user, get_user_row, search_users, update_profile, upsert_user

__all__ = [
    "authenticate_user",
    "create_access_token",
    "decode_access_token",
    "get_current_user",
    "get_optional_user",
    "login",
    "require_roles",
    "signup",
    "LinkupError",
    "ValidationError",
    "NotFoundError",
    "OwnershipError",
    "PermissionDeniedError",
    "ConflictError",
    "TransactionAbortedError",
    "PersistenceError",
    "list_posts",
    "list_user_posts",
    "get_post",
    "create_post",
    "delete_post",
    "search_posts",
    "list_comments",
    "count_comments",
    "create_comment",
    "delete_comment",
    "count_likes",
    "is_post_liked",
    "toggle_like",
    "FollowStats",
    "toggle_follow",
    "is_following",
    "count_followers",
    "count_following",
    "get_follow_stats",
    "are_friends",
    "send_friend_request",
    "accept_friend_request",
    "reject_friend_request",
    "remove_friend",
    "list_friends",
    "list_friend_requests",
    "list_sent_requests",
    "get_friendship_state",
    "list_stories",
    "create_story",
    "delete_story",
    "get_user",
    "get_user_row",
    "upsert_user",
    "update_profile",
    "search_users",
    "map_user",
    "map_author",
    "AdminStats",
    "load_admin_stats",
    "list_users",
    "set_user_status",
    "list_posts_for_review",
    "UploadResult",
    "store_upload",
]
