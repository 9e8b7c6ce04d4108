"""Typed failures raised by the service layer.

Services never build HTTP responses; :mod:`linkup.exception_handlers` maps
each class below onto a status code.
"""
from __future__ import annotations


class LinkupError(Exception):
    """Base class for domain failures raised by the stores."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message or self.__class__.__name__


class ValidationError(LinkupError):
    """Required input is missing or malformed."""


class NotFoundError(LinkupError):
    """A referenced entity does not exist."""


class OwnershipError(LinkupError):
    """The actor does not own the resource they tried to change."""


class PermissionDeniedError(LinkupError):
    """The actor's role or account status forbids the operation."""


class ConflictError(LinkupError):
    """The write collides with existing state, e.g. a duplicate signup email."""


class TransactionAbortedError(LinkupError):
    """A multi-row transaction was rolled back because one step had no effect."""


class PersistenceError(LinkupError):
    """The database failed unexpectedly."""


__all__ = [
    "LinkupError",
    "ValidationError",
    "NotFoundError",
    "OwnershipError",
    "PermissionDeniedError",
    "ConflictError",
    "TransactionAbortedError",
    "PersistenceError",
]
