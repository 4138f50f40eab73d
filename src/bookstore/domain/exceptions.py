"""Domain-level exceptions.

All failures raised by the order placement path are subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller input was rejected before anything was written.

    ``field`` names the offending form field, or is None for errors that
    concern the request as a whole (an empty cart, a stale price).
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class PersistenceError(DomainException):
    """The transactional store could not be used. Never retried."""


class RollbackFailedError(PersistenceError):
    """A failed placement could not be rolled back."""


class PlacementFailedError(DomainException):
    """A write inside the placement transaction failed and was rolled back."""

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(message)
        self.cause = cause
