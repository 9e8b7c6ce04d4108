"""Story feed API routes."""
from __future__ import annotations

from typing import cast
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ..constants import MAX_PAGE_LIMIT
from ..database import get_session
from ..models import User
from ..schemas import StoryCreate, StoryFeedResponse, StoryResponse
from ..services import create_story, delete_story, get_current_user, get_optional_user, list_stories

router = APIRouter(prefix="/stories", tags=["stories"])


@router.get("", response_model=StoryFeedResponse)
async def list_stories_endpoint(
    limit: int | None = Query(None, ge=1, le=MAX_PAGE_LIMIT),
    cursor: str | None = Query(None),
    db: Session = Depends(get_session),
    viewer: User | None = Depends(get_optional_user),
) -> StoryFeedResponse:
    viewer_id = cast(UUID, viewer.id) if viewer else None
    records, next_cursor = list_stories(db, viewer_id=viewer_id, limit=limit, cursor=cursor)
    return StoryFeedResponse(items=[StoryResponse(**record) for record in records], next_cursor=next_cursor)


@router.post("", response_model=StoryResponse, status_code=status.HTTP_201_CREATED)
async def create_story_endpoint(
    payload: StoryCreate,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> StoryResponse:
    record = create_story(
        db,
        author_id=cast(UUID, current_user.id),
        content=payload.content,
        image_url=payload.image_url,
        video_url=payload.video_url,
    )
    return StoryResponse(**record)


@router.delete("/{story_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_story_endpoint(
    story_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> None:
    delete_story(db, story_id=story_id, requester_id=cast(UUID, current_user.id))


__all__ = ["router"]
