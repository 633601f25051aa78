"""Notification services."""

from .notification_delivery import (
    notify,
    get_user_notifications,
    mark_notification_read,
)
from .exceptions import (
    NotificationsServiceError,
    NotificationNotFoundError,
)

__all__ = [
    'notify',
    'get_user_notifications',
    'mark_notification_read',
    'NotificationsServiceError',
    'NotificationNotFoundError',
]
