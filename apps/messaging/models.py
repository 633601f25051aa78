from django.db import models
from django.conf import settings
import uuid


class ConversationStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    ARCHIVED = 'archived', 'Archived'


class MessageType(models.TextChoices):
    TEXT = 'text', 'Text'
    IMAGE = 'image', 'Image'
    SYSTEM = 'system', 'System'


class Conversation(models.Model):
    """Thread between a rental's renter and the product owner."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    rental = models.OneToOneField(
        'rentals.Rental',
        on_delete=models.CASCADE,
        related_name='conversation'
    )
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='owner_conversations'
    )
    renter = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='renter_conversations'
    )
    status = models.CharField(
        max_length=20,
        choices=ConversationStatus.choices,
        default=ConversationStatus.ACTIVE
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'conversations'
        ordering = ['-updated_at']
        indexes = [
            models.Index(fields=['owner', 'status'], name='conv_owner_status_idx'),
            models.Index(fields=['renter', 'status'], name='conv_renter_status_idx'),
        ]

    def __str__(self):
        return f"Conversation on rental {self.rental_id}"

    def has_participant(self, user):
        return user.id in (self.owner_id, self.renter_id)

    def other_participant_id(self, user):
        return self.renter_id if user.id == self.owner_id else self.owner_id


class Message(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    conversation = models.ForeignKey(
        Conversation,
        on_delete=models.CASCADE,
        related_name='messages'
    )
    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='sent_messages'
    )
    content = models.TextField()
    message_type = models.CharField(
        max_length=20,
        choices=MessageType.choices,
        default=MessageType.TEXT
    )
    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'messages'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['conversation', '-created_at'], name='messages_conv_created_idx'),
            models.Index(fields=['conversation', 'is_read'], name='messages_conv_unread_idx'),
        ]

    def __str__(self):
        return f"{self.sender}: {self.content[:40]}"
