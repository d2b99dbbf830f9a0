# users_service/core/exceptions.py
"""Typed failures raised by the service layer and translated at the HTTP boundary."""

from users_service import messages


class UsersServiceError(Exception):
    """Base exception for the users service."""

    status_code = 500
    default_message = messages.Unexpected

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(UsersServiceError):
    """Raised when a user or address does not exist."""
    status_code = 404
    default_message = messages.UserNotFound


class BadRequestError(UsersServiceError):
    """Raised when an invariant check on the input fails."""
    status_code = 400
    default_message = "Bad request"


class UnauthorizedError(UsersServiceError):
    """Raised when the token is missing/invalid or login credentials are wrong."""
    status_code = 401
    default_message = messages.NotAuthenticated


class ForbiddenError(UsersServiceError):
    """Raised when the authorization policy denies the call."""
    status_code = 403
    default_message = messages.Forbidden


class StorageError(UsersServiceError):
    """Base for persistence-layer failures. The message is never shown to clients."""
    pass


class StorageUnavailableError(StorageError):
    """Raised when the database cannot be reached."""
    status_code = 503
    default_message = messages.StorageUnavailable


class StorageConflictError(StorageError):
    """Raised when the database rejects a write with a constraint violation."""
    status_code = 409
    default_message = messages.StorageConflict
