"""Helpers for case-insensitive substring matching in SQL."""
from __future__ import annotations

LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """Return a ``LIKE`` pattern matching ``text`` literally anywhere in a value.

    Use together with ``escape=LIKE_ESCAPE`` so ``%`` and ``_`` typed by the
    user are not treated as wildcards.
    """

    escaped = (
        text.lower()
        .replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", f"{LIKE_ESCAPE}%")
        .replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


__all__ = ["LIKE_ESCAPE", "contains_pattern"]
