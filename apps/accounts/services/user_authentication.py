"""User authentication and token services."""

import logging

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken

from .exceptions import InvalidCredentialsError, InvalidTokenError, SuspendedAccountError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def authenticate_user(*, email: str, password: str) -> User:
    """
    Authenticate user with email and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        email: User's email
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        SuspendedAccountError: If account is suspended
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(email__iexact=email)
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError()

    if not user.check_password(password):
        raise InvalidCredentialsError()

    if not user.is_active:
        raise SuspendedAccountError()

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user


def issue_tokens(user: User) -> dict:
    """Return a fresh access/refresh token pair for ``user``."""
    refresh = RefreshToken.for_user(user)
    return {
        'access_token': str(refresh.access_token),
        'refresh_token': str(refresh),
    }


def refresh_access_token(*, refresh_token: str) -> str:
    """
    Exchange a refresh token for a new access token.

    Args:
        refresh_token: Encoded refresh token

    Returns:
        Encoded access token

    Raises:
        InvalidTokenError: If the token is malformed, expired, an access
            token, or belongs to a missing or suspended user
    """
    try:
        refresh = RefreshToken(refresh_token)
    except TokenError:
        try:
            AccessToken(refresh_token)
        except TokenError:
            raise InvalidTokenError("Invalid or expired refresh token")
        raise InvalidTokenError("Invalid token type")

    user_id = refresh.get(api_settings.USER_ID_CLAIM)
    user = User.objects.filter(id=user_id).first()
    if user is None or not user.is_active:
        logger.info("Refresh rejected for missing or suspended user %s", user_id)
        raise InvalidTokenError("User not found or inactive")

    return str(refresh.access_token)
