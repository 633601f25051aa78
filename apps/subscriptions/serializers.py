from rest_framework import serializers
from .models import Subscription, SubscriptionPlan, SubscriptionStatus, SubscriptionUsage


class SubscriptionPlanSerializer(serializers.ModelSerializer):
    class Meta:
        model = SubscriptionPlan
        fields = [
            'id',
            'name',
            'description',
            'price_cents',
            'currency',
            'billing_cycle',
            'features',
            'is_active',
            'max_listings',
            'max_rentals_per_month',
            'priority_support',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class SubscriptionSerializer(serializers.ModelSerializer):
    """Subscription with its plan nested."""

    user_id = serializers.UUIDField(read_only=True)
    plan_id = serializers.UUIDField(read_only=True)
    plan = SubscriptionPlanSerializer(read_only=True)

    class Meta:
        model = Subscription
        fields = [
            'id',
            'user_id',
            'plan_id',
            'plan',
            'status',
            'current_period_start',
            'current_period_end',
            'cancel_at_period_end',
            'canceled_at',
            'provider_subscription_id',
            'metadata',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class SubscriptionUsageSerializer(serializers.ModelSerializer):
    subscription_id = serializers.UUIDField(read_only=True)

    class Meta:
        model = SubscriptionUsage
        fields = [
            'id',
            'subscription_id',
            'usage_type',
            'usage_count',
            'usage_limit',
            'period_start',
            'period_end',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class SubscriptionCreateSerializer(serializers.Serializer):
    plan_id = serializers.UUIDField()


class SubscriptionCancelSerializer(serializers.Serializer):
    cancel_at_period_end = serializers.BooleanField(required=False, default=True)


class SubscriptionFilterSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=SubscriptionStatus.choices, required=False)
