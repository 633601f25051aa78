from django.db import models
from django.conf import settings
import uuid


class PaymentType(models.TextChoices):
    CARD = 'card', 'Card'
    BANK_ACCOUNT = 'bank_account', 'Bank account'
    DIGITAL_WALLET = 'digital_wallet', 'Digital wallet'


class PaymentProvider(models.TextChoices):
    STRIPE = 'stripe', 'Stripe'
    PAYPAL = 'paypal', 'PayPal'
    SQUARE = 'square', 'Square'


class PaymentIntentStatus(models.TextChoices):
    PENDING = 'pending', 'Pending'
    SUCCEEDED = 'succeeded', 'Succeeded'
    FAILED = 'failed', 'Failed'
    CANCELED = 'canceled', 'Canceled'


class TransactionType(models.TextChoices):
    CHARGE = 'charge', 'Charge'
    REFUND = 'refund', 'Refund'


class PaymentMethod(models.Model):
    """A user's stored payment instrument, referenced by provider id."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='payment_methods'
    )
    payment_type = models.CharField(max_length=20, choices=PaymentType.choices)
    provider = models.CharField(max_length=20, choices=PaymentProvider.choices)
    provider_payment_method_id = models.CharField(max_length=255)
    is_default = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)
    metadata = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'payment_methods'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'is_active'], name='paymethods_user_active_idx'),
        ]

    def __str__(self):
        return f"{self.provider} {self.payment_type} ({self.user})"


class PaymentIntent(models.Model):
    """
    An amount to be charged for either a rental or a subscription.

    Exactly one of ``rental`` / ``subscription`` is set.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='payment_intents'
    )
    rental = models.ForeignKey(
        'rentals.Rental',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payment_intents'
    )
    subscription = models.ForeignKey(
        'subscriptions.Subscription',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payment_intents'
    )
    amount_cents = models.PositiveIntegerField()
    currency = models.CharField(max_length=3, default='USD')
    status = models.CharField(
        max_length=20,
        choices=PaymentIntentStatus.choices,
        default=PaymentIntentStatus.PENDING,
        db_index=True
    )
    payment_method = models.ForeignKey(
        PaymentMethod,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='payment_intents'
    )
    provider_payment_intent_id = models.CharField(max_length=255, blank=True, null=True)
    provider_charge_id = models.CharField(max_length=255, blank=True, null=True)
    failure_reason = models.TextField(blank=True, null=True)
    metadata = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'payment_intents'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['user', 'status'], name='payintents_user_status_idx'),
        ]

    def __str__(self):
        return f"{self.amount_cents} {self.currency} ({self.status})"


class PaymentTransaction(models.Model):
    """Provider-side money movement recorded against an intent."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    payment_intent = models.ForeignKey(
        PaymentIntent,
        on_delete=models.CASCADE,
        related_name='transactions'
    )
    transaction_type = models.CharField(max_length=20, choices=TransactionType.choices)
    amount_cents = models.PositiveIntegerField()
    currency = models.CharField(max_length=3)
    status = models.CharField(max_length=20, choices=PaymentIntentStatus.choices)
    provider_transaction_id = models.CharField(max_length=255, blank=True, null=True)
    failure_reason = models.TextField(blank=True, null=True)
    metadata = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'payment_transactions'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.transaction_type} {self.amount_cents} {self.currency}"
