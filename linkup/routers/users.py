"""User profile and follow API routes."""
from __future__ import annotations

from typing import cast
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import (
    FollowStatusResponse,
    FollowToggleResponse,
    PostFeedResponse,
    PostResponse,
    UserProfileResponse,
    UserResponse,
)
from ..services import (
    ValidationError,
    get_current_user,
    get_follow_stats,
    get_friendship_state,
    get_optional_user,
    get_user,
    get_user_row,
    is_following,
    list_user_posts,
    toggle_follow,
)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/{user_id}/follow", response_model=FollowToggleResponse)
async def toggle_follow_endpoint(
    user_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> FollowToggleResponse:
    viewer_id = cast(UUID, current_user.id)
    if viewer_id == user_id:
        raise ValidationError("You cannot follow yourself")
    get_user_row(db, user_id)
    following = toggle_follow(db, follower_id=viewer_id, following_id=user_id)
    return FollowToggleResponse(following=following, status="followed" if following else "unfollowed")


@router.get("/{user_id}/follow-status", response_model=FollowStatusResponse)
async def follow_status_endpoint(
    user_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> FollowStatusResponse:
    following = is_following(db, follower_id=cast(UUID, current_user.id), following_id=user_id)
    return FollowStatusResponse(user_id=user_id, is_following=following)


@router.get("/{user_id}", response_model=UserProfileResponse)
async def user_profile_endpoint(
    user_id: UUID,
    db: Session = Depends(get_session),
    viewer: User | None = Depends(get_optional_user),
) -> UserProfileResponse:
    viewer_id = cast(UUID, viewer.id) if viewer else None
    user = get_user(db, user_id=user_id)
    stats = get_follow_stats(db, user_id=user_id, viewer_id=viewer_id)
    friendship = get_friendship_state(db, viewer_id=viewer_id, other_id=user_id) if viewer_id else "none"
    return UserProfileResponse(
        user=UserResponse(**user),
        followers_count=stats.followers_count,
        following_count=stats.following_count,
        is_following=stats.is_following,
        friendship=friendship,
    )


@router.get("/{user_id}/posts", response_model=PostFeedResponse)
async def user_posts_endpoint(
    user_id: UUID,
    db: Session = Depends(get_session),
    viewer: User | None = Depends(get_optional_user),
) -> PostFeedResponse:
    get_user_row(db, user_id)
    viewer_id = cast(UUID, viewer.id) if viewer else None
    records = list_user_posts(db, author_id=user_id, viewer_id=viewer_id)
    return PostFeedResponse(items=[PostResponse(**record) for record in records])


__all__ = ["router"]
