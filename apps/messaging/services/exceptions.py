"""Domain-specific exceptions for messaging services."""

from apps.core.exceptions import ConflictError, ForbiddenError, NotFoundError


class MessagingServiceError(Exception):
    """Base exception for messaging services."""
    pass


class ConversationRentalNotFoundError(MessagingServiceError, NotFoundError):
    default_detail = 'Rental not found'


class ConversationPermissionError(MessagingServiceError, ForbiddenError):
    default_detail = 'You can only create conversations for your own rentals'


class ConversationExistsError(MessagingServiceError, ConflictError):
    default_detail = 'Conversation already exists'


class ConversationNotFoundError(MessagingServiceError, NotFoundError):
    default_detail = 'Conversation not found'


class ConversationAccessError(MessagingServiceError, NotFoundError):
    """Raised for message operations on a conversation the user can't use."""
    default_detail = 'Conversation not found or access denied'
