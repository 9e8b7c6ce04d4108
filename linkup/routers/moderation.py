"""Moderation-focused API endpoints."""
from __future__ import annotations

from dataclasses import asdict
from typing import cast
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..constants import MAX_PAGE_LIMIT
from ..database import get_session
from ..models import User
from ..schemas import (
    ModerationPostListResponse,
    ModerationStats,
    ModerationUserListResponse,
    ModerationUserSummary,
    PostResponse,
    UserResponse,
    UserStatusUpdate,
)
from ..services import (
    NotFoundError,
    delete_post,
    list_posts_for_review,
    list_users,
    load_admin_stats,
    require_roles,
    set_user_status,
)

router = APIRouter(prefix="/admin", tags=["moderation"])


@router.get("/stats", response_model=ModerationStats)
async def admin_stats_endpoint(
    db: Session = Depends(get_session),
    current_user: User = Depends(require_roles("admin")),
) -> ModerationStats:
    return ModerationStats(**asdict(load_admin_stats(db)))


@router.get("/users", response_model=ModerationUserListResponse)
async def admin_users_endpoint(
    skip: int = Query(0, ge=0),
    limit: int = Query(25, ge=1, le=MAX_PAGE_LIMIT),
    search: str | None = None,
    db: Session = Depends(get_session),
    current_user: User = Depends(require_roles("admin")),
) -> ModerationUserListResponse:
    records = list_users(db, skip=skip, limit=limit, search=search)
    return ModerationUserListResponse(items=[ModerationUserSummary(**record) for record in records])


@router.post("/users/{user_id}/suspend", response_model=UserResponse)
async def admin_suspend_user_endpoint(
    user_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(require_roles("admin")),
) -> UserResponse:
    record = set_user_status(db, actor_id=cast(UUID, current_user.id), user_id=user_id, new_status="suspended")
    return UserResponse(**record)


@router.patch("/users/{user_id}/status", response_model=UserResponse)
async def admin_user_status_endpoint(
    user_id: UUID,
    payload: UserStatusUpdate,
    db: Session = Depends(get_session),
    current_user: User = Depends(require_roles("admin")),
) -> UserResponse:
    record = set_user_status(db, actor_id=cast(UUID, current_user.id), user_id=user_id, new_status=payload.status)
    return UserResponse(**record)


@router.get("/posts", response_model=ModerationPostListResponse)
async def admin_posts_endpoint(
    limit: int = Query(25, ge=1, le=MAX_PAGE_LIMIT),
    cursor: str | None = Query(None),
    db: Session = Depends(get_session),
    current_user: User = Depends(require_roles("admin")),
) -> ModerationPostListResponse:
    records, next_cursor = list_posts_for_review(db, limit=limit, cursor=cursor)
    return ModerationPostListResponse(items=[PostResponse(**record) for record in records], next_cursor=next_cursor)


@router.delete("/posts/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def admin_delete_post_endpoint(
    post_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(require_roles("admin")),
) -> None:
    if not delete_post(db, post_id=post_id, requester_id=cast(UUID, current_user.id), allow_any=True):
        raise NotFoundError("Post not found")


__all__ = ["router"]
