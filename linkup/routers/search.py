"""Combined user and post search."""
from __future__ import annotations

from typing import cast
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import PostResponse, SearchResponse, UserResponse
from ..services import get_optional_user, search_posts, search_users

router = APIRouter(tags=["search"])


@router.get("/search", response_model=SearchResponse)
async def search_endpoint(
    q: str = Query("", max_length=150),
    limit: int = Query(20, ge=1, le=50),
    db: Session = Depends(get_session),
    viewer: User | None = Depends(get_optional_user),
) -> SearchResponse:
    """Case-insensitive substring match over user names/emails and post text."""

    viewer_id = cast(UUID, viewer.id) if viewer else None
    users = search_users(db, query=q, limit=limit)
    posts = search_posts(db, query=q, viewer_id=viewer_id, limit=limit)
    return SearchResponse(
        query=q,
        users=[UserResponse(**record) for record in users],
        posts=[PostResponse(**record) for record in posts],
    )


__all__ = ["router"]
