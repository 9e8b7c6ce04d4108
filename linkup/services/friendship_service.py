"""Friend requests and mutual friendships.

Per ordered pair (requester, recipient) the relationship moves through
``none -> pending -> friends`` and back to ``none`` on reject or removal.
Accepting and removing touch several rows and always run as one
transaction, so a half-written friendship is never observable.
"""
from __future__ import annotations

import logging
from typing import Any, Literal, NoReturn
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import FriendRequest, Friendship, User
from .errors import NotFoundError, PersistenceError, TransactionAbortedError
from .persistence import commit
from .user_mapper import map_user

logger = logging.getLogger(__name__)

FriendshipState = Literal["self", "friends", "incoming", "outgoing", "none"]


def _pending(db: Session, *, recipient_id: UUID, requester_id: UUID) -> FriendRequest | None:
    return db.get(FriendRequest, (recipient_id, requester_id))


def _friend_edge(db: Session, user_id: UUID, friend_id: UUID) -> Friendship | None:
    return db.get(Friendship, (user_id, friend_id))


def are_friends(db: Session, *, user_id: UUID, other_id: UUID) -> bool:
    return _friend_edge(db, user_id, other_id) is not None


def send_friend_request(db: Session, *, requester_id: UUID, recipient_id: UUID) -> bool:
    """Add ``requester_id`` to the recipient's inbox.

    Returns ``False`` without raising when a request is already pending or the
    two users are already friends; callers treat that as a no-op.
    """

    if db.get(User, recipient_id) is None:
        raise NotFoundError("User not found")

    if _pending(db, recipient_id=recipient_id, requester_id=requester_id) is not None:
        return False
    if are_friends(db, user_id=recipient_id, other_id=requester_id):
        return False

    db.add(FriendRequest(recipient_id=recipient_id, requester_id=requester_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return False
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to send friend request")
        raise PersistenceError("Unable to send friend request") from exc
    return True


def _abort(db: Session, reason: str, user_id: UUID, requester_id: UUID) -> NoReturn:
    db.rollback()
    logger.warning("Friend accept aborted for %s <- %s: %s", user_id, requester_id, reason)
    raise TransactionAbortedError(f"Friend request could not be accepted: {reason}")


def _add_friend_edge(db: Session, user_id: UUID, friend_id: UUID) -> bool:
    if _friend_edge(db, user_id, friend_id) is not None:
        return False
    db.add(Friendship(user_id=user_id, friend_id=friend_id))
    db.flush()
    return True


def accept_friend_request(db: Session, *, user_id: UUID, requester_id: UUID) -> None:
    """Turn a pending request into a mutual friendship atomically.

    The three writes (drop the pending entry, add each side's friend entry)
    commit together. If any of them changes nothing, everything is rolled
    back and :class:`TransactionAbortedError` is raised.
    """

    try:
        removed = db.execute(
            delete(FriendRequest).where(
                FriendRequest.recipient_id == user_id,
                FriendRequest.requester_id == requester_id,
            )
        ).rowcount
        if not removed:
            _abort(db, "no pending request", user_id, requester_id)
        if not _add_friend_edge(db, user_id, requester_id):
            _abort(db, "already in friends list", user_id, requester_id)
        if not _add_friend_edge(db, requester_id, user_id):
            _abort(db, "already in requester's friends list", user_id, requester_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Friend accept failed for %s <- %s", user_id, requester_id)
        raise PersistenceError("Unable to accept friend request") from exc

    commit(db, action="accept friend request")
    logger.info("Users %s and %s are now friends", user_id, requester_id)


def reject_friend_request(db: Session, *, user_id: UUID, requester_id: UUID) -> bool:
    removed = db.execute(
        delete(FriendRequest).where(
            FriendRequest.recipient_id == user_id,
            FriendRequest.requester_id == requester_id,
        )
    ).rowcount
    if not removed:
        db.rollback()
        return False
    commit(db, action="reject friend request")
    return True


def remove_friend(db: Session, *, user_id: UUID, friend_id: UUID) -> bool:
    """Remove both sides of a friendship in a single transaction."""

    forward = db.execute(
        delete(Friendship).where(Friendship.user_id == user_id, Friendship.friend_id == friend_id)
    ).rowcount
    reverse = db.execute(
        delete(Friendship).where(Friendship.user_id == friend_id, Friendship.friend_id == user_id)
    ).rowcount
    if not forward and not reverse:
        db.rollback()
        return False
    if forward != reverse:
        logger.warning("Asymmetric friendship between %s and %s removed", user_id, friend_id)
    commit(db, action="remove friend")
    return True


def list_friends(db: Session, *, user_id: UUID) -> list[dict[str, Any]]:
    stmt = (
        select(User)
        .join(Friendship, Friendship.friend_id == User.id)
        .where(Friendship.user_id == user_id)
        .order_by(Friendship.created_at.asc())
    )
    return [map_user(user) for user in db.scalars(stmt)]


def list_friend_requests(db: Session, *, user_id: UUID) -> list[dict[str, Any]]:
    """Return the users waiting in ``user_id``'s inbox, oldest first."""

    stmt = (
        select(User)
        .join(FriendRequest, FriendRequest.requester_id == User.id)
        .where(FriendRequest.recipient_id == user_id)
        .order_by(FriendRequest.created_at.asc())
    )
    return [map_user(user) for user in db.scalars(stmt)]


def list_sent_requests(db: Session, *, user_id: UUID) -> list[dict[str, Any]]:
    stmt = (
        select(User)
        .join(FriendRequest, FriendRequest.recipient_id == User.id)
        .where(FriendRequest.requester_id == user_id)
        .order_by(FriendRequest.created_at.asc())
    )
    return [map_user(user) for user in db.scalars(stmt)]


def get_friendship_state(db: Session, *, viewer_id: UUID, other_id: UUID) -> FriendshipState:
    if viewer_id == other_id:
        return "self"
    if are_friends(db, user_id=viewer_id, other_id=other_id):
        return "friends"
    if _pending(db, recipient_id=viewer_id, requester_id=other_id) is not None:
        return "incoming"
    if _pending(db, recipient_id=other_id, requester_id=viewer_id) is not None:
        return "outgoing"
    return "none"


__all__ = [
    "FriendshipState",
    "are_friends",
    "send_friend_request",
    "accept_friend_request",
    "reject_friend_request",
    "remove_friend",
    "list_friends",
    "list_friend_requests",
    "list_sent_requests",
    "get_friendship_state",
]
