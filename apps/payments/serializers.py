from rest_framework import serializers
from .models import PaymentIntent, PaymentIntentStatus, PaymentMethod


class PaymentMethodSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = PaymentMethod
        fields = [
            'id',
            'user_id',
            'payment_type',
            'provider',
            'provider_payment_method_id',
            'is_default',
            'is_active',
            'metadata',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class PaymentMethodCreateSerializer(serializers.Serializer):
    """Type and provider are checked by the service to report exact errors."""

    payment_type = serializers.CharField(max_length=20)
    provider = serializers.CharField(max_length=20)
    provider_payment_method_id = serializers.CharField(max_length=255)
    is_default = serializers.BooleanField(required=False, default=False)
    metadata = serializers.JSONField(required=False, default=dict)


class PaymentIntentSerializer(serializers.ModelSerializer):
    user_id = serializers.UUIDField(read_only=True)
    rental_id = serializers.UUIDField(read_only=True, allow_null=True)
    subscription_id = serializers.UUIDField(read_only=True, allow_null=True)
    payment_method_id = serializers.UUIDField(read_only=True, allow_null=True)

    class Meta:
        model = PaymentIntent
        fields = [
            'id',
            'user_id',
            'rental_id',
            'subscription_id',
            'amount_cents',
            'currency',
            'status',
            'payment_method_id',
            'provider_payment_intent_id',
            'provider_charge_id',
            'failure_reason',
            'metadata',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class PaymentIntentCreateSerializer(serializers.Serializer):
    rental_id = serializers.UUIDField(required=False, allow_null=True)
    subscription_id = serializers.UUIDField(required=False, allow_null=True)
    amount_cents = serializers.IntegerField()
    currency = serializers.CharField(max_length=3, required=False, allow_null=True)
    payment_method_id = serializers.UUIDField(required=False, allow_null=True)
    metadata = serializers.JSONField(required=False, default=dict)


class PaymentIntentConfirmSerializer(serializers.Serializer):
    payment_method_id = serializers.UUIDField(required=False, allow_null=True)


class PaymentIntentFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=PaymentIntentStatus.choices, required=False)
    payment_type = serializers.ChoiceField(choices=['rental', 'subscription'], required=False)
