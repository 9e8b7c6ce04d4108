"""Pydantic schemas for authentication endpoints."""
from __future__ import annotations

from pydantic import EmailStr, Field

from .base import CamelModel
from .users import UserResponse


class SignupRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class AuthResponse(CamelModel):
    user: UserResponse
    token: str
    token_type: str = "bearer"


__all__ = ["SignupRequest", "LoginRequest", "AuthResponse"]
