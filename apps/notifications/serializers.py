from rest_framework import serializers
from apps.accounts.models import User
from .models import Notification, NotificationCategory


class NotificationSerializer(serializers.ModelSerializer):
    notification_id = serializers.UUIDField(source='id', read_only=True)
    user_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Notification
        fields = [
            'notification_id',
            'user_id',
            'title',
            'message',
            'category',
            'data',
            'is_read',
            'read_at',
            'created_at',
        ]
        read_only_fields = fields


class NotificationCreateSerializer(serializers.Serializer):
    """Input for staff-created notifications."""

    user_id = serializers.PrimaryKeyRelatedField(
        queryset=User.objects.all(),
        source='user',
    )
    title = serializers.CharField(max_length=200)
    message = serializers.CharField()
    category = serializers.ChoiceField(
        choices=NotificationCategory.choices,
        default=NotificationCategory.SYSTEM,
    )
    data = serializers.JSONField(required=False, default=dict)


class NotificationFilterSerializer(serializers.Serializer):
    is_read = serializers.BooleanField(required=False, allow_null=True, default=None)
