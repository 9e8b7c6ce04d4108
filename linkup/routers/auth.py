"""Authentication related API routes."""
from __future__ import annotations

from typing import cast
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_session
from ..models import User
from ..schemas import AuthResponse, LoginRequest, ProfileUpdateRequest, SignupRequest, UserResponse
from ..services import get_current_user, login, map_user, signup, update_profile

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def signup_endpoint(
    payload: SignupRequest,
    db: Session = Depends(get_session),
) -> AuthResponse:
    user, token = signup(
        db,
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    return AuthResponse(user=UserResponse(**map_user(user)), token=token)


@router.post("/login", response_model=AuthResponse)
async def login_endpoint(
    payload: LoginRequest,
    db: Session = Depends(get_session),
) -> AuthResponse:
    result = login(db, email=payload.email, password=payload.password)
    if result is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    user, token = result
    return AuthResponse(user=UserResponse(**map_user(user)), token=token)


@router.get("/user", response_model=UserResponse)
async def current_user_endpoint(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse(**map_user(current_user))


@router.put("/user", response_model=UserResponse)
async def update_current_user_endpoint(
    payload: ProfileUpdateRequest,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    changes = payload.model_dump(exclude_unset=True)
    record = update_profile(db, user_id=cast(UUID, current_user.id), changes=changes)
    return UserResponse(**record)


__all__ = ["router"]
