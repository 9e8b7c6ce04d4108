"""Signup, login and bearer-token identity for the API.

Credentials live in ``auth_credentials`` and never travel with the profile
row. Tokens are HS256 JWTs whose subject is the user id.
"""
from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional, Tuple
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import get_settings
from ..constants import DEFAULT_STATUS
from ..database import get_session
from ..models import AuthCredential, User
from .errors import ConflictError, PersistenceError, ValidationError
from .persistence import commit

logger = logging.getLogger(__name__)

_security = HTTPBearer(auto_error=False)
_pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

_PLACEHOLDER_SECRETS = {"changeme", "change-me", "placeholder", "your-secret-key"}


@lru_cache(maxsize=1)
def _get_jwt_secret() -> str:
    value = (os.getenv("JWT_SECRET_KEY") or "").strip()
    if not value or value.lower() in _PLACEHOLDER_SECRETS:
        raise RuntimeError("Environment variable JWT_SECRET_KEY is required and must not use placeholder defaults")
    return value


def hash_password(password: str) -> str:
    """Hash a plain-text password using bcrypt."""

    return _pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify that ``password`` matches ``hashed_password``."""

    try:
        return _pwd_context.verify(password, hashed_password)
    except ValueError:
        logger.warning("Stored password hash could not be parsed")
        return False


def create_access_token(subject: UUID, *, expires_minutes: Optional[int] = None) -> str:
    """Create a signed JWT holding the provided ``subject``."""

    settings = get_settings()
    expire_delta = timedelta(minutes=expires_minutes or settings.jwt_expires_minutes)
    now = datetime.now(timezone.utc)
    payload = {"sub": str(subject), "exp": now + expire_delta, "iat": now}
    return jwt.encode(payload, _get_jwt_secret(), algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> UUID:
    """Decode and validate a JWT, returning the embedded subject UUID."""

    try:
        payload = jwt.decode(token, _get_jwt_secret(), algorithms=[get_settings().jwt_algorithm])
    except JWTError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token") from exc

    subject = payload.get("sub")
    if not subject:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload")
    try:
        return UUID(subject)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token payload") from exc


def signup(
    db: Session,
    *,
    email: str,
    password: str,
    first_name: str | None = None,
    last_name: str | None = None,
) -> Tuple[User, str]:
    """Create the profile and credential rows and return the user with a token."""

    normalized_email = (email or "").strip().lower()
    if not normalized_email or not password:
        raise ValidationError("Email and password are required")

    existing = db.scalar(select(AuthCredential).where(AuthCredential.email == normalized_email))
    if existing is not None:
        raise ConflictError("User already exists")

    user = User(email=normalized_email, first_name=first_name, last_name=last_name)
    db.add(user)
    try:
        db.flush()
        db.add(AuthCredential(user_id=user.id, email=normalized_email, password_hash=hash_password(password)))
        db.commit()
    except IntegrityError as exc:
        # Lost a race with a concurrent signup for the same email.
        db.rollback()
        raise ConflictError("User already exists") from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to register user")
        raise PersistenceError("Unable to register user") from exc
    db.refresh(user)
    logger.info("Registered user %s", user.id)

    return user, create_access_token(user.id)


def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """Authenticate against stored credentials; recreate a missing profile row."""

    normalized_email = (email or "").strip().lower()
    credential = db.scalar(select(AuthCredential).where(AuthCredential.email == normalized_email))
    if credential is None:
        return None
    if not verify_password(password, credential.password_hash):
        return None

    user = db.get(User, credential.user_id)
    if user is None:
        user = User(id=credential.user_id, email=normalized_email)
        db.add(user)
        commit(db, action="restore user profile")
        db.refresh(user)
    return user


def login(db: Session, *, email: str, password: str) -> Optional[Tuple[User, str]]:
    user = authenticate_user(db, email, password)
    if user is None:
        return None
    return user, create_access_token(user.id)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(_security),
    db: Session = Depends(get_session),
) -> User:
    """Resolve the authenticated, active user from the bearer token."""

    if not credentials or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Access token required")

    user_id = decode_access_token(credentials.credentials)

    user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    if (user.status or DEFAULT_STATUS) != "active":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=f"Account is {user.status}")

    return user


async def get_optional_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_security),
    db: Session = Depends(get_session),
) -> User | None:
    """Return the authenticated user when a valid bearer token is provided."""

    if not credentials or credentials.scheme.lower() != "bearer":
        return None

    try:
        user_id = decode_access_token(credentials.credentials)
    except HTTPException:
        return None

    return db.get(User, user_id)


def require_roles(*allowed_roles: str):
    normalized = {role.lower() for role in allowed_roles if role}

    async def _resolver(user: User = Depends(get_current_user)) -> User:
        role = (getattr(user, "role", None) or "user").lower()
        if normalized and role not in normalized:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Insufficient permissions")
        return user

    return _resolver


__all__ = [
    "signup",
    "login",
    "authenticate_user",
    "create_access_token",
    "decode_access_token",
    "hash_password",
    "verify_password",
    "get_current_user",
    "get_optional_user",
    "require_roles",
]
