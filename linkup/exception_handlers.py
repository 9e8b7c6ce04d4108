"""Translate service-layer errors into HTTP responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from .services.errors import (
    ConflictError,
    LinkupError,
    NotFoundError,
    OwnershipError,
    PermissionDeniedError,
    PersistenceError,
    TransactionAbortedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[LinkupError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (OwnershipError, status.HTTP_404_NOT_FOUND),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PermissionDeniedError, status.HTTP_403_FORBIDDEN),
    (ConflictError, status.HTTP_409_CONFLICT),
    (TransactionAbortedError, status.HTTP_409_CONFLICT),
    (PersistenceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def status_for(exc: LinkupError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def _handle_linkup_error(request: Request, exc: LinkupError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def install_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LinkupError, _handle_linkup_error)


__all__ = ["install_exception_handlers", "status_for"]
