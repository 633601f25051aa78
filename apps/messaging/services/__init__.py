"""Messaging services."""

from .conversations import (
    create_conversation,
    get_user_conversations,
    get_conversation,
    send_message,
    get_conversation_messages,
    mark_messages_read,
)
from .exceptions import (
    MessagingServiceError,
    ConversationRentalNotFoundError,
    ConversationPermissionError,
    ConversationExistsError,
    ConversationNotFoundError,
    ConversationAccessError,
)

__all__ = [
    'create_conversation',
    'get_user_conversations',
    'get_conversation',
    'send_message',
    'get_conversation_messages',
    'mark_messages_read',
    'MessagingServiceError',
    'ConversationRentalNotFoundError',
    'ConversationPermissionError',
    'ConversationExistsError',
    'ConversationNotFoundError',
    'ConversationAccessError',
]
