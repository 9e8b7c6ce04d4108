"""Friend request and friend list API routes."""
from __future__ import annotations

from typing import cast
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import FriendActionResponse, FriendsOverviewResponse, UserResponse
from ..services import (
    NotFoundError,
    ValidationError,
    accept_friend_request,
    get_current_user,
    list_friend_requests,
    list_friends,
    list_sent_requests,
    reject_friend_request,
    remove_friend,
    send_friend_request,
)

router = APIRouter(prefix="/friends", tags=["friends"])


@router.get("", response_model=FriendsOverviewResponse)
async def friends_overview_endpoint(
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> FriendsOverviewResponse:
    user_id = cast(UUID, current_user.id)
    return FriendsOverviewResponse(
        friends=[UserResponse(**record) for record in list_friends(db, user_id=user_id)],
        incoming_requests=[UserResponse(**record) for record in list_friend_requests(db, user_id=user_id)],
        outgoing_requests=[UserResponse(**record) for record in list_sent_requests(db, user_id=user_id)],
    )


@router.post("/requests/{user_id}", response_model=FriendActionResponse, status_code=status.HTTP_201_CREATED)
async def send_request_endpoint(
    user_id: UUID,
    response: Response,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> FriendActionResponse:
    requester_id = cast(UUID, current_user.id)
    if requester_id == user_id:
        raise ValidationError("You cannot send a friend request to yourself")
    if not send_friend_request(db, requester_id=requester_id, recipient_id=user_id):
        response.status_code = status.HTTP_200_OK
        return FriendActionResponse(user_id=user_id, status="noop")
    return FriendActionResponse(user_id=user_id, status="requested")


@router.post("/requests/{user_id}/accept", response_model=FriendActionResponse)
async def accept_request_endpoint(
    user_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> FriendActionResponse:
    accept_friend_request(db, user_id=cast(UUID, current_user.id), requester_id=user_id)
    return FriendActionResponse(user_id=user_id, status="accepted")


@router.post("/requests/{user_id}/reject", response_model=FriendActionResponse)
async def reject_request_endpoint(
    user_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> FriendActionResponse:
    if not reject_friend_request(db, user_id=cast(UUID, current_user.id), requester_id=user_id):
        raise NotFoundError("Friend request not found")
    return FriendActionResponse(user_id=user_id, status="rejected")


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_friend_endpoint(
    user_id: UUID,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> None:
    if not remove_friend(db, user_id=cast(UUID, current_user.id), friend_id=user_id):
        raise NotFoundError("Friend not found")


__all__ = ["router"]
