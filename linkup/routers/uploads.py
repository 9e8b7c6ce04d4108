"""Standalone upload endpoint storing media below the media root."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, File, UploadFile, status

from ..models import User
from ..schemas import UploadResponse
from ..services import get_current_user, store_upload

router = APIRouter(tags=["uploads"])

logger = logging.getLogger(__name__)


@router.post("/upload", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_endpoint(
    file: UploadFile = File(...),
    current_user: User = Depends(get_current_user),
) -> UploadResponse:
    """Store an image or video and return its public URL.

    Any other content type is rejected with 400.
    """

    result = await store_upload(file)
    logger.info("User %s uploaded %s", current_user.id, result.filename)
    return UploadResponse(
        url=result.url,
        type=result.type,
        filename=result.filename,
        content_type=result.content_type,
    )


__all__ = ["router"]
