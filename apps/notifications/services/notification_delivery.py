"""Notification creation and read-state services."""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.utils import timezone

from apps.accounts.models import User
from apps.notifications.models import Notification, NotificationCategory
from .exceptions import NotificationNotFoundError

logger = logging.getLogger(__name__)


def notify(
    *,
    user: User,
    title: str,
    message: str,
    category: str = NotificationCategory.SYSTEM,
    data: Optional[dict] = None
) -> Notification:
    """
    Create a notification for ``user``.

    Args:
        user: Recipient
        title: Short headline
        message: Body text
        category: One of NotificationCategory
        data: Extra JSON payload (ids the client can link to)

    Returns:
        Created Notification instance
    """
    notification = Notification.objects.create(
        user=user,
        title=title,
        message=message,
        category=category,
        data=data or {},
    )
    logger.debug("Notification %s (%s) created for user %s", notification.id, category, user.id)
    return notification


def get_user_notifications(*, user_id: UUID, is_read: Optional[bool] = None) -> QuerySet:
    """Return the user's notifications, newest first."""
    queryset = Notification.objects.filter(user_id=user_id)
    if is_read is not None:
        queryset = queryset.filter(is_read=is_read)
    return queryset.order_by('-created_at')


@transaction.atomic
def mark_notification_read(*, user_id: UUID, notification_id: UUID) -> Notification:
    """
    Mark one of the user's notifications as read.

    Raises:
        NotificationNotFoundError: If the notification doesn't exist or
            belongs to another user
    """
    try:
        notification = Notification.objects.select_for_update().get(
            id=notification_id,
            user_id=user_id,
        )
    except Notification.DoesNotExist:
        raise NotificationNotFoundError()

    if not notification.is_read:
        notification.is_read = True
        notification.read_at = timezone.now()
        notification.save(update_fields=['is_read', 'read_at'])

    return notification
