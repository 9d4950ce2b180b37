"""Errors raised by the use cases."""

from __future__ import annotations


class DomainError(ValueError):
    """Base class for errors caused by the content of a request."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    """The requested entity id does not resolve."""


class ValidationError(DomainError):
    """Required input is missing or malformed."""


class InvalidReferenceError(DomainError):
    """A foreign key does not resolve to an existing entity."""


class ConflictError(DomainError):
    """The change would break name uniqueness or the default-role rule."""


# Body message of every 500, injected or unhandled.
SERVER_ERROR_MESSAGE = "Server Error"


__all__ = [
    "ConflictError",
    "DomainError",
    "InvalidReferenceError",
    "NotFoundError",
    "SERVER_ERROR_MESSAGE",
    "ValidationError",
]
