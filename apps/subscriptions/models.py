from django.db import models
from django.conf import settings
import uuid


class BillingCycle(models.TextChoices):
    MONTHLY = 'monthly', 'Monthly'
    YEARLY = 'yearly', 'Yearly'


class SubscriptionStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    CANCELED = 'canceled', 'Canceled'
    PAST_DUE = 'past_due', 'Past due'


class UsageType(models.TextChoices):
    LISTINGS = 'listings', 'Listings'
    RENTALS = 'rentals', 'Rentals'


class SubscriptionPlan(models.Model):
    """A purchasable plan with listing/rental allowances."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)
    price_cents = models.PositiveIntegerField()
    currency = models.CharField(max_length=3, default='USD')
    billing_cycle = models.CharField(
        max_length=20,
        choices=BillingCycle.choices,
        default=BillingCycle.MONTHLY
    )
    features = models.JSONField(default=dict, blank=True)
    is_active = models.BooleanField(default=True)

    # Allowances (null = unlimited)
    max_listings = models.PositiveIntegerField(null=True, blank=True)
    max_rentals_per_month = models.PositiveIntegerField(null=True, blank=True)
    priority_support = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'subscription_plans'
        ordering = ['price_cents']

    def __str__(self):
        return f"{self.name} ({self.billing_cycle})"


class Subscription(models.Model):
    """A user's subscription to a plan for a billing period."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='subscriptions'
    )
    plan = models.ForeignKey(
        SubscriptionPlan,
        on_delete=models.PROTECT,
        related_name='subscriptions'
    )
    status = models.CharField(
        max_length=20,
        choices=SubscriptionStatus.choices,
        default=SubscriptionStatus.ACTIVE,
        db_index=True
    )
    current_period_start = models.DateTimeField()
    current_period_end = models.DateTimeField()
    cancel_at_period_end = models.BooleanField(default=False)
    canceled_at = models.DateTimeField(null=True, blank=True)
    provider_subscription_id = models.CharField(max_length=255, blank=True)
    metadata = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'subscriptions'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'status'], name='subs_user_status_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.plan.name} ({self.status})"


class SubscriptionUsage(models.Model):
    """Usage counter of one kind for one subscription period."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    subscription = models.ForeignKey(
        Subscription,
        on_delete=models.CASCADE,
        related_name='usage'
    )
    usage_type = models.CharField(max_length=20, choices=UsageType.choices)
    usage_count = models.PositiveIntegerField(default=0)
    usage_limit = models.PositiveIntegerField(null=True, blank=True)
    period_start = models.DateTimeField()
    period_end = models.DateTimeField()

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'subscription_usage'
        ordering = ['usage_type']
        constraints = [
            models.UniqueConstraint(
                fields=['subscription', 'usage_type', 'period_start'],
                name='unique_usage_per_period'
            ),
        ]

    def __str__(self):
        return f"{self.usage_type}: {self.usage_count}/{self.usage_limit or 'unlimited'}"
