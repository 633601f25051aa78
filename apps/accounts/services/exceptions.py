"""Domain-specific exceptions for accounts services."""

from apps.core.exceptions import (
    ConflictError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
)


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class UserAlreadyExistsError(AccountsServiceError, ConflictError):
    """Raised when signing up with an email that is already registered."""
    default_detail = 'User already exists'


class InvalidCredentialsError(AccountsServiceError, UnauthorizedError):
    """Raised when authentication credentials are invalid."""
    default_detail = 'Invalid credentials'


class SuspendedAccountError(AccountsServiceError, ForbiddenError):
    """Raised when a suspended account tries to log in."""
    default_detail = 'Account is suspended'


class InvalidTokenError(AccountsServiceError, UnauthorizedError):
    """Raised when a refresh token is invalid, expired or of the wrong kind."""
    default_detail = 'Invalid token'


class UserNotFoundError(AccountsServiceError, NotFoundError):
    """Raised when user does not exist."""
    default_detail = 'User not found'
