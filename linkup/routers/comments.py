"""Comment routes addressed by comment id."""
from __future__ import annotations

from typing import cast
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..services import delete_comment, get_current_user

router = APIRouter(prefix="/comments", tags=["posts"])


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment_endpoint(
    comment_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> None:
    delete_comment(db, comment_id=comment_id, requester_id=cast(UUID, current_user.id))


__all__ = ["router"]
