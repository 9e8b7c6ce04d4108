"""Schemas for media uploads."""
from __future__ import annotations

from typing import Literal

from .base import CamelModel


class UploadResponse(CamelModel):
    url: str
    type: Literal["image", "video"]
    filename: str
    content_type: str


__all__ = ["UploadResponse"]
