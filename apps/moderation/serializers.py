from rest_framework import serializers


class UserModerationSerializer(serializers.Serializer):
    user_id = serializers.UUIDField()
    action = serializers.CharField(help_text='suspend or activate')


class ProductModerationSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    action = serializers.CharField(help_text='approve or reject')


class ModerationResultSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    status = serializers.CharField()
