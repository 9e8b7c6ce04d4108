"""ORM model for one side of a mutual friendship.

A friendship between A and B is always stored as the two rows (A, B) and
(B, A); both are written and removed inside a single transaction.
"""
from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.sql import func

from linkup.database import Base
from .base import utcnow


class Friendship(Base):
    __tablename__ = "friendships"

    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    friend_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)


__all__ = ["Friendship"]
