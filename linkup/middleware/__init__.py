"""Middleware exports."""
from __future__ import annotations

from .request_log import RequestLogMiddleware

__all__ = ["RequestLogMiddleware"]
