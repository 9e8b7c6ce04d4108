"""SQLAlchemy ORM models for user profiles and their credentials."""
from __future__ import annotations

import uuid

from sqlalchemy import JSON, Column, Date, ForeignKey, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from linkup.database import Base
from .base import TimestampMixin


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(String(255), unique=True, nullable=True, index=True)
    first_name = Column(String(150), nullable=True)
    last_name = Column(String(150), nullable=True)
    profile_image_url = Column(String(1024), nullable=True)
    bio = Column(Text, nullable=True)
    title = Column(String(255), nullable=True)
    address = Column(String(500), nullable=True)
    gender = Column(String(32), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    phone_number = Column(String(64), nullable=True)
    other_links = Column(JSON, nullable=True)
    # Legacy rows may carry NULL here; the user mapper supplies defaults.
    role = Column(String(32), nullable=True, default="user")
    status = Column(String(32), nullable=True, default="active")

    credential = relationship("AuthCredential", back_populates="user", uselist=False)
    posts = relationship("Post", back_populates="author")
    stories = relationship("Story", back_populates="author")


class AuthCredential(TimestampMixin, Base):
    """Password material, kept apart from the profile row."""

    __tablename__ = "auth_credentials"

    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    user = relationship("User", back_populates="credential")


__all__ = ["User", "AuthCredential"]
