"""Domain-specific exceptions for notification services."""

from apps.core.exceptions import NotFoundError


class NotificationsServiceError(Exception):
    """Base exception for notification services."""
    pass


class NotificationNotFoundError(NotificationsServiceError, NotFoundError):
    default_detail = 'Notification not found'
