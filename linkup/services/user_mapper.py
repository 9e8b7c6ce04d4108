"""Translate persisted user rows into the canonical user shape."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import UUID

from ..constants import DEFAULT_ROLE, DEFAULT_STATUS

_PROFILE_FIELDS = (
    "email",
    "first_name",
    "last_name",
    "profile_image_url",
    "bio",
    "title",
    "address",
    "gender",
    "date_of_birth",
    "phone_number",
    "created_at",
    "updated_at",
)

_AUTHOR_FIELDS = ("first_name", "last_name", "profile_image_url", "title")


def _read(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def _normalize_id(value: Any) -> Any:
    if value is None or isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return value


def map_user(record: Any) -> dict[str, Any]:
    """Return the public user dict for an ORM ``User`` or a raw mapping.

    Legacy rows may lack ``role``/``status``; those default to ``"user"`` and
    ``"active"``. Mappings may carry the identifier as ``_id`` instead of ``id``.
    """

    raw_id = _read(record, "id")
    if raw_id is None:
        raw_id = _read(record, "_id")

    mapped: dict[str, Any] = {"id": _normalize_id(raw_id)}
    for field in _PROFILE_FIELDS:
        mapped[field] = _read(record, field)
    mapped["other_links"] = list(_read(record, "other_links") or [])
    mapped["role"] = _read(record, "role") or DEFAULT_ROLE
    mapped["status"] = _read(record, "status") or DEFAULT_STATUS
    return mapped


def map_author(record: Any) -> dict[str, Any]:
    """Return the trimmed author projection embedded in feed records."""

    author: dict[str, Any] = {"id": _normalize_id(_read(record, "id"))}
    for field in _AUTHOR_FIELDS:
        author[field] = _read(record, field)
    author["role"] = _read(record, "role") or DEFAULT_ROLE
    return author


__all__ = ["map_user", "map_author"]
