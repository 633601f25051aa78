"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import UserAlreadyExistsError

User = get_user_model()
logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    email: str,
    password: str,
    first_name: str = "",
    last_name: str = ""
) -> User:
    """
    Register a new user.

    Args:
        email: User's email address (stored lowercased)
        password: User's password (will be hashed)
        first_name: Optional first name
        last_name: Optional last name

    Returns:
        Created User instance

    Raises:
        UserAlreadyExistsError: If the email is already registered
    """
    if User.objects.filter(email__iexact=email).exists():
        raise UserAlreadyExistsError()

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
        )
    except IntegrityError:
        # Concurrent signup with the same email
        raise UserAlreadyExistsError()

    logger.info("Registered user %s", user.id)
    return user
