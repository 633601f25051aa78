"""User profile services."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.contrib.auth import get_user_model

from apps.accounts.models import UserStatus
from .exceptions import UserNotFoundError

User = get_user_model()
logger = logging.getLogger(__name__)


def get_user_by_id(*, user_id: UUID) -> User:
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError()


@transaction.atomic
def update_profile(
    *,
    user: User,
    first_name: Optional[str] = None,
    last_name: Optional[str] = None
) -> User:
    """
    Update the caller's name fields. ``None`` leaves a field unchanged.

    Returns:
        Updated User instance
    """
    update_fields = []
    if first_name is not None:
        user.first_name = first_name
        update_fields.append('first_name')
    if last_name is not None:
        user.last_name = last_name
        update_fields.append('last_name')

    if update_fields:
        user.save(update_fields=update_fields + ['updated_at'])

    return user


@transaction.atomic
def set_user_status(*, user_id: UUID, status: str) -> User:
    """
    Suspend or reactivate a user.

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError()

    if status not in UserStatus.values:
        raise ValueError(f"Unknown user status: {status}")

    user.status = status
    user.save(update_fields=['status', 'updated_at'])
    logger.info("User %s status set to %s", user.id, status)
    return user
