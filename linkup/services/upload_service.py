"""Persist uploaded media files below the configured media root."""
from __future__ import annotations

import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Literal
from uuid import uuid4

from fastapi import UploadFile

from ..config import get_settings
from .errors import PersistenceError, ValidationError

logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 50 * 1024 * 1024
UPLOAD_FOLDER = "uploads"

MediaType = Literal["image", "video"]


@dataclass(frozen=True, slots=True)
class UploadResult:
    url: str
    type: MediaType
    filename: str
    content_type: str


def classify_content_type(content_type: str | None) -> MediaType:
    normalized = (content_type or "").split(";")[0].strip().lower()
    if normalized.startswith("image/"):
        return "image"
    if normalized.startswith("video/"):
        return "video"
    raise ValidationError("Only image and video uploads are supported")


# Served inline by browsers with script access to the API origin.
_ACTIVE_CONTENT_TYPES = frozenset({"image/svg+xml"})


def _extension_for(content_type: str) -> str:
    """Pick the stored file extension from the declared media type.

    The client filename is ignored; the static mount derives the served
    MIME type from this extension, so it must agree with ``content_type``.
    """

    normalized = content_type.split(";")[0].strip().lower()
    if normalized in _ACTIVE_CONTENT_TYPES:
        return ""
    extension = (mimetypes.guess_extension(normalized) or "").lower()
    guessed, _ = mimetypes.guess_type(f"upload{extension}")
    if not extension or guessed is None or guessed.split("/")[0] != normalized.split("/")[0]:
        return ""
    return extension


async def store_upload(file: UploadFile, *, media_root: Path | None = None) -> UploadResult:
    """Write ``file`` to disk and return its public URL and coarse media type."""

    settings = get_settings()
    content_type = (file.content_type or "").strip()
    media_type = classify_content_type(content_type)

    payload = await file.read()
    if not payload:
        raise ValidationError("Uploaded file is empty")
    if len(payload) > MAX_UPLOAD_BYTES:
        raise ValidationError("Uploaded file is too large")

    root = media_root or Path(settings.media_root)
    filename = f"{uuid4().hex}{_extension_for(content_type)}"
    target_dir = root / UPLOAD_FOLDER
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        (target_dir / filename).write_bytes(payload)
    except OSError as exc:
        logger.exception("Failed to store upload %s", filename)
        raise PersistenceError("Unable to store upload") from exc

    url = f"{settings.public_base_url.rstrip('/')}/{UPLOAD_FOLDER}/{filename}"
    logger.info("Stored %s upload %s (%d bytes)", media_type, filename, len(payload))
    return UploadResult(url=url, type=media_type, filename=filename, content_type=content_type)


__all__ = ["UploadResult", "MediaType", "classify_content_type", "store_upload", "MAX_UPLOAD_BYTES"]
