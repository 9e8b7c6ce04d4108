"""Keyset pagination helpers shared by the feed-style list operations."""
from __future__ import annotations

import base64
import binascii
from datetime import datetime
from typing import Any, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, and_, or_

from ..constants import MAX_PAGE_LIMIT
from .errors import ValidationError

T = TypeVar("T")


def encode_cursor(created_at: datetime, row_id: UUID) -> str:
    raw = f"{created_at.isoformat()}|{row_id.hex}".encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii")


def decode_cursor(cursor: str) -> tuple[datetime, UUID]:
    try:
        raw = base64.urlsafe_b64decode(cursor.encode("ascii")).decode("utf-8")
        stamp, _, hex_id = raw.partition("|")
        return datetime.fromisoformat(stamp), UUID(hex_id)
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise ValidationError("Invalid cursor") from exc


def normalize_limit(limit: int | None) -> int | None:
    if limit is None:
        return None
    return max(1, min(int(limit), MAX_PAGE_LIMIT))


def apply_keyset(statement: Select[Any], created_col: Any, id_col: Any, cursor: str | None) -> Select[Any]:
    """Restrict a newest-first statement to rows strictly after ``cursor``."""

    if not cursor:
        return statement
    created_at, row_id = decode_cursor(cursor)
    return statement.where(
        or_(created_col < created_at, and_(created_col == created_at, id_col < row_id))
    )


def split_page(rows: Sequence[T], limit: int | None, key) -> tuple[list[T], str | None]:
    """Trim an over-fetched result to ``limit`` and build the next cursor.

    Callers fetch ``limit + 1`` rows; the extra row only signals that another
    page exists. ``key`` returns ``(created_at, id)`` for a row.
    """

    items = list(rows)
    if limit is None or len(items) <= limit:
        return items, None
    items = items[:limit]
    created_at, row_id = key(items[-1])
    return items, encode_cursor(created_at, row_id)


__all__ = ["encode_cursor", "decode_cursor", "normalize_limit", "apply_keyset", "split_page"]
