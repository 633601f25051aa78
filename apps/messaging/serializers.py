from rest_framework import serializers
from .models import Conversation, ConversationStatus, Message, MessageType


class MessageSerializer(serializers.ModelSerializer):
    conversation_id = serializers.UUIDField(read_only=True)
    sender_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = Message
        fields = [
            'id',
            'conversation_id',
            'sender_id',
            'content',
            'message_type',
            'is_read',
            'created_at',
        ]
        read_only_fields = fields


class ConversationSerializer(serializers.ModelSerializer):
    """Conversation with its latest message and the caller's unread count."""

    rental_id = serializers.UUIDField(read_only=True)
    owner_id = serializers.UUIDField(read_only=True)
    renter_id = serializers.UUIDField(read_only=True)
    last_message = serializers.SerializerMethodField()
    unread_count = serializers.SerializerMethodField()

    class Meta:
        model = Conversation
        fields = [
            'id',
            'rental_id',
            'owner_id',
            'renter_id',
            'status',
            'created_at',
            'updated_at',
            'last_message',
            'unread_count',
        ]
        read_only_fields = fields

    def get_last_message(self, obj) -> dict | None:
        message = obj.messages.order_by('-created_at').first()
        return MessageSerializer(message).data if message else None

    def get_unread_count(self, obj) -> int:
        return getattr(obj, 'unread_count', 0)


class ConversationCreateSerializer(serializers.Serializer):
    rental_id = serializers.UUIDField()
    message = serializers.CharField(max_length=5000)


class MessageCreateSerializer(serializers.Serializer):
    content = serializers.CharField(max_length=5000)
    message_type = serializers.ChoiceField(
        choices=MessageType.choices,
        required=False,
        default=MessageType.TEXT
    )


class ConversationFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ConversationStatus.choices, required=False)
