"""Post, comment and like API routes."""
from __future__ import annotations

import logging
from typing import cast
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..constants import MAX_PAGE_LIMIT
from ..database import get_session
from ..models import User
from ..schemas import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    LikeToggleResponse,
    PostCreate,
    PostFeedResponse,
    PostResponse,
)
from ..services import (
    NotFoundError,
    ValidationError,
    create_comment,
    create_post,
    delete_post,
    get_current_user,
    get_optional_user,
    get_post,
    list_comments,
    list_posts,
    toggle_like,
)

router = APIRouter(prefix="/posts", tags=["posts"])

logger = logging.getLogger(__name__)


def _viewer_id(viewer: User | None) -> UUID | None:
    return cast(UUID, viewer.id) if viewer else None


@router.get("", response_model=PostFeedResponse)
async def list_posts_endpoint(
    limit: int | None = Query(None, ge=1, le=MAX_PAGE_LIMIT),
    cursor: str | None = Query(None),
    db: Session = Depends(get_session),
    viewer: User | None = Depends(get_optional_user),
) -> PostFeedResponse:
    records, next_cursor = list_posts(db, viewer_id=_viewer_id(viewer), limit=limit, cursor=cursor)
    return PostFeedResponse(items=[PostResponse(**record) for record in records], next_cursor=next_cursor)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post_endpoint(
    payload: PostCreate,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> PostResponse:
    """Create a post; text may be empty only when an image or video is attached."""

    content = payload.content.strip()
    if not content and not payload.image_url and not payload.video_url:
        raise ValidationError("Post content or media is required")

    record = create_post(
        db,
        author_id=cast(UUID, current_user.id),
        content=content,
        image_url=payload.image_url,
        video_url=payload.video_url,
    )
    logger.info("Post %s created by %s", record["id"], current_user.id)
    return PostResponse(**record)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post_endpoint(
    post_id: UUID,
    db: Session = Depends(get_session),
    viewer: User | None = Depends(get_optional_user),
) -> PostResponse:
    return PostResponse(**get_post(db, post_id=post_id, viewer_id=_viewer_id(viewer)))


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post_endpoint(
    post_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> None:
    if not delete_post(db, post_id=post_id, requester_id=cast(UUID, current_user.id)):
        raise NotFoundError("Post not found")


@router.get("/{post_id}/comments", response_model=CommentListResponse)
async def list_comments_endpoint(
    post_id: UUID,
    db: Session = Depends(get_session),
) -> CommentListResponse:
    return CommentListResponse(items=[CommentResponse(**record) for record in list_comments(db, post_id=post_id)])


@router.post("/{post_id}/comments", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
async def create_comment_endpoint(
    post_id: UUID,
    payload: CommentCreate,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> CommentResponse:
    record = create_comment(db, post_id=post_id, author_id=cast(UUID, current_user.id), content=payload.content)
    return CommentResponse(**record)


@router.post("/{post_id}/like", response_model=LikeToggleResponse)
async def toggle_like_endpoint(
    post_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> LikeToggleResponse:
    return LikeToggleResponse(**toggle_like(db, post_id=post_id, user_id=cast(UUID, current_user.id)))


__all__ = ["router"]
