"""Errors raised by use cases and translated to HTTP responses by the API."""


class DomainError(Exception):
    """Base class for expected failures carrying a user facing message."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Input is malformed or violates a business rule."""

    status_code = 400


class ForbiddenError(DomainError):
    """The caller is authenticated but not allowed to perform the action."""

    status_code = 403


class NotFoundError(DomainError):
    """A referenced entity does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """The action clashes with the current state of an entity."""

    status_code = 409


class InternalError(DomainError):
    """Unexpected failure in the persistence layer."""

    status_code = 500


__all__ = [
    "DomainError",
    "ValidationError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
    "InternalError",
]
