"""Conversation and message services."""

import logging
from typing import Optional
from uuid import UUID

from django.db import IntegrityError, transaction
from django.db.models import Count, Q, QuerySet
from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.notifications.models import NotificationCategory
from apps.notifications.services import notify
from apps.rentals.models import Rental
from ..models import Conversation, ConversationStatus, Message, MessageType
from .exceptions import (
    ConversationAccessError,
    ConversationExistsError,
    ConversationNotFoundError,
    ConversationPermissionError,
    ConversationRentalNotFoundError,
)

User = get_user_model()
logger = logging.getLogger(__name__)


def _participant_filter(user: User) -> Q:
    return Q(owner=user) | Q(renter=user)


def _with_unread_count(queryset: QuerySet[Conversation], user: User) -> QuerySet[Conversation]:
    """Annotate ``unread_count``: unread messages sent by the other party."""
    return queryset.annotate(
        unread_count=Count(
            'messages',
            filter=Q(messages__is_read=False) & ~Q(messages__sender=user),
        )
    )


@transaction.atomic
def create_conversation(*, user: User, rental_id: UUID, message: str) -> Conversation:
    """
    Open the conversation for a rental with its first message.

    Only the renter can start it; the product owner is the other party.

    Raises:
        ConversationRentalNotFoundError: If rental doesn't exist
        ConversationPermissionError: If user is not the renter
        ConversationExistsError: If the rental already has a conversation
    """
    try:
        rental = Rental.objects.select_related('product').get(id=rental_id)
    except Rental.DoesNotExist:
        raise ConversationRentalNotFoundError()

    if rental.renter_id != user.id:
        raise ConversationPermissionError()

    existing_id = Conversation.objects.filter(rental=rental).values_list('id', flat=True).first()
    if existing_id is not None:
        raise ConversationExistsError(f'Conversation already exists: {existing_id}')

    try:
        with transaction.atomic():
            conversation = Conversation.objects.create(
                rental=rental,
                owner_id=rental.product.owner_id,
                renter=user,
            )
    except IntegrityError:
        raise ConversationExistsError()

    Message.objects.create(
        conversation=conversation,
        sender=user,
        content=message,
        message_type=MessageType.TEXT,
    )

    logger.info("Conversation %s opened for rental %s", conversation.id, rental.id)
    return conversation


def get_user_conversations(
    *,
    user: User,
    status: Optional[str] = None
) -> QuerySet[Conversation]:
    """Conversations the user takes part in, most recently active first."""
    queryset = Conversation.objects.filter(
        _participant_filter(user),
        status=status or ConversationStatus.ACTIVE,
    )
    return _with_unread_count(queryset, user).order_by('-updated_at')


def get_conversation(*, user: User, conversation_id: UUID) -> Conversation:
    """
    Raises:
        ConversationNotFoundError: If it doesn't exist or user is not a participant
    """
    queryset = _with_unread_count(Conversation.objects.filter(_participant_filter(user)), user)
    try:
        return queryset.get(id=conversation_id)
    except Conversation.DoesNotExist:
        raise ConversationNotFoundError()


def _get_accessible_conversation(user: User, conversation_id: UUID, **filters) -> Conversation:
    try:
        return Conversation.objects.get(_participant_filter(user), id=conversation_id, **filters)
    except Conversation.DoesNotExist:
        raise ConversationAccessError()


@transaction.atomic
def send_message(
    *,
    user: User,
    conversation_id: UUID,
    content: str,
    message_type: str = MessageType.TEXT
) -> Message:
    """
    Post a message to an active conversation and notify the other party.

    Raises:
        ConversationAccessError: If the conversation is missing, archived
            or the user is not a participant
    """
    conversation = _get_accessible_conversation(
        user,
        conversation_id,
        status=ConversationStatus.ACTIVE,
    )

    message = Message.objects.create(
        conversation=conversation,
        sender=user,
        content=content,
        message_type=message_type,
    )
    Conversation.objects.filter(id=conversation.id).update(updated_at=timezone.now())

    notify(
        user=User.objects.get(id=conversation.other_participant_id(user)),
        title='New message',
        message=f'{user.get_full_name()}: {content[:100]}',
        category=NotificationCategory.MESSAGE,
        data={'conversation_id': str(conversation.id), 'message_id': str(message.id)},
    )
    return message


def get_conversation_messages(*, user: User, conversation_id: UUID) -> QuerySet[Message]:
    """
    Messages of a conversation, newest first.

    Raises:
        ConversationAccessError: If user is not a participant
    """
    conversation = _get_accessible_conversation(user, conversation_id)
    return conversation.messages.order_by('-created_at')


def mark_messages_read(*, user: User, conversation_id: UUID) -> int:
    """
    Mark the other party's unread messages as read.

    Returns:
        Number of messages marked

    Raises:
        ConversationAccessError: If user is not a participant
    """
    conversation = _get_accessible_conversation(user, conversation_id)
    return (
        conversation.messages
        .filter(is_read=False)
        .exclude(sender=user)
        .update(is_read=True, read_at=timezone.now())
    )
