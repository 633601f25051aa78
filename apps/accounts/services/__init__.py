"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    UserAlreadyExistsError,
    InvalidCredentialsError,
    SuspendedAccountError,
    InvalidTokenError,
    UserNotFoundError,
)
from .user_registration import register_user
from .user_authentication import authenticate_user, issue_tokens, refresh_access_token
from .user_profile import get_user_by_id, update_profile, set_user_status

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'UserAlreadyExistsError',
    'InvalidCredentialsError',
    'SuspendedAccountError',
    'InvalidTokenError',
    'UserNotFoundError',
    # Services
    'register_user',
    'authenticate_user',
    'issue_tokens',
    'refresh_access_token',
    'get_user_by_id',
    'update_profile',
    'set_user_status',
]
