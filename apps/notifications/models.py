from django.db import models
from django.conf import settings
import uuid


class NotificationCategory(models.TextChoices):
    SYSTEM = 'system', 'System'
    RENTAL = 'rental', 'Rental'
    MESSAGE = 'message', 'Message'
    PAYMENT = 'payment', 'Payment'
    REVIEW = 'review', 'Review'


class Notification(models.Model):
    """A message addressed to one user."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='notifications'
    )
    title = models.CharField(max_length=200)
    message = models.TextField()
    category = models.CharField(
        max_length=20,
        choices=NotificationCategory.choices,
        default=NotificationCategory.SYSTEM
    )
    data = models.JSONField(default=dict, blank=True)

    is_read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'notifications'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'is_read'], name='notif_user_read_idx'),
            models.Index(fields=['-created_at'], name='notif_created_idx'),
        ]

    def __str__(self):
        return f"{self.title} -> {self.user}"
