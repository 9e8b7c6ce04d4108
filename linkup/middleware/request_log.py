"""Middleware that logs one line per API request."""
from __future__ import annotations

import logging
import time
from collections.abc import Sequence

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log ``METHOD path status in Nms`` for requests below the given prefixes."""

    def __init__(self, app: ASGIApp, *, path_prefixes: Sequence[str] | None = None) -> None:
        super().__init__(app)
        self._prefixes = tuple(path_prefixes or ("/api",))

    def _should_log(self, path: str) -> bool:
        return any(path.startswith(prefix) for prefix in self._prefixes)

    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if not self._should_log(path):
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s %d in %dms", request.method, path, response.status_code, elapsed_ms)
        return response


__all__ = ["RequestLogMiddleware"]
