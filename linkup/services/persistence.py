"""Session helpers shared by the stores."""
from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import PersistenceError

logger = logging.getLogger(__name__)


def commit(db: Session, *, action: str) -> None:
    """Commit the pending unit of work or roll it back and raise ``PersistenceError``."""

    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to %s", action)
        raise PersistenceError(f"Unable to {action}") from exc


__all__ = ["commit"]
