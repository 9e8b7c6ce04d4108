"""Project-wide constant values."""
from __future__ import annotations

from datetime import timedelta

STORY_TTL = timedelta(hours=24)

MAX_PAGE_LIMIT = 100

USER_STATUSES = ("active", "suspended", "banned")
DEFAULT_ROLE = "user"
DEFAULT_STATUS = "active"

__all__ = [
    "STORY_TTL",
    "MAX_PAGE_LIMIT",
    "USER_STATUSES",
    "DEFAULT_ROLE",
    "DEFAULT_STATUS",
]
