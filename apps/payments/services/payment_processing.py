"""
Payment method and payment intent services.

Provider calls go through ``apps.payments.providers.get_payment_provider``
so the mock can be swapped for a real gateway via settings.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet
from django.contrib.auth import get_user_model

from apps.rentals.models import Rental
from apps.subscriptions.models import Subscription
from ..models import (
    PaymentIntent,
    PaymentIntentStatus,
    PaymentMethod,
    PaymentProvider,
    PaymentTransaction,
    PaymentType,
    TransactionType,
)
from ..providers import PaymentProviderError, get_payment_provider
from .exceptions import (
    InvalidPaymentProviderError,
    InvalidPaymentTargetError,
    InvalidPaymentTypeError,
    PaymentIntentNotFoundError,
    PaymentIntentNotPendingError,
    PaymentMethodNotFoundError,
    PaymentMethodRequiredError,
    PaymentTargetNotFoundError,
    PaymentTargetPermissionError,
)

User = get_user_model()
logger = logging.getLogger(__name__)


# =============================================================================
# Payment methods
# =============================================================================

@transaction.atomic
def create_payment_method(
    *,
    user: User,
    payment_type: str,
    provider: str,
    provider_payment_method_id: str,
    is_default: bool = False,
    metadata: Optional[dict] = None
) -> PaymentMethod:
    """
    Store a payment method for a user.

    Marking it as default clears the flag on the user's other methods.

    Raises:
        InvalidPaymentTypeError: If payment_type is unknown
        InvalidPaymentProviderError: If provider is unknown
    """
    if payment_type not in PaymentType.values:
        raise InvalidPaymentTypeError()
    if provider not in PaymentProvider.values:
        raise InvalidPaymentProviderError()

    if is_default:
        PaymentMethod.objects.filter(user=user, is_default=True).update(is_default=False)

    return PaymentMethod.objects.create(
        user=user,
        payment_type=payment_type,
        provider=provider,
        provider_payment_method_id=provider_payment_method_id,
        is_default=is_default,
        metadata=metadata or {},
    )


def get_user_payment_methods(*, user: User) -> QuerySet[PaymentMethod]:
    """Active payment methods, default first."""
    return PaymentMethod.objects.filter(user=user, is_active=True).order_by('-is_default', '-created_at')


# =============================================================================
# Payment intents
# =============================================================================

def _check_payment_target(
    *,
    user: User,
    rental_id: Optional[UUID],
    subscription_id: Optional[UUID]
) -> None:
    if rental_id and subscription_id:
        raise InvalidPaymentTargetError('Cannot specify both rental_id and subscription_id')
    if not rental_id and not subscription_id:
        raise InvalidPaymentTargetError()

    if rental_id:
        renter_id = Rental.objects.filter(id=rental_id).values_list('renter_id', flat=True).first()
        if renter_id is None:
            raise PaymentTargetNotFoundError('Rental not found')
        if renter_id != user.id:
            raise PaymentTargetPermissionError()
    else:
        owner_id = Subscription.objects.filter(id=subscription_id).values_list('user_id', flat=True).first()
        if owner_id is None:
            raise PaymentTargetNotFoundError('Subscription not found')
        if owner_id != user.id:
            raise PaymentTargetPermissionError(
                'You can only create payment intents for your own subscriptions'
            )


def create_payment_intent(
    *,
    user: User,
    amount_cents: int,
    rental_id: Optional[UUID] = None,
    subscription_id: Optional[UUID] = None,
    currency: Optional[str] = None,
    payment_method_id: Optional[UUID] = None,
    metadata: Optional[dict] = None
) -> PaymentIntent:
    """
    Create a pending payment intent for a rental or a subscription.

    Args:
        user: Paying user
        amount_cents: Amount in the currency's minor unit, must be positive
        rental_id: Rental being paid (renter only)
        subscription_id: Subscription being paid (its owner only)
        currency: ISO code, defaults to USD
        payment_method_id: Optional method to use at confirmation
        metadata: Free-form JSON

    Returns:
        Created PaymentIntent

    Raises:
        InvalidPaymentTargetError: Bad amount or rental/subscription combination
        PaymentTargetNotFoundError: Referenced rental/subscription doesn't exist
        PaymentTargetPermissionError: Referenced object isn't the user's
        PaymentMethodNotFoundError: If payment_method_id isn't one of the user's methods
    """
    if amount_cents <= 0:
        raise InvalidPaymentTargetError('Amount must be greater than 0')

    _check_payment_target(user=user, rental_id=rental_id, subscription_id=subscription_id)

    if payment_method_id and not PaymentMethod.objects.filter(
        id=payment_method_id, user=user, is_active=True
    ).exists():
        raise PaymentMethodNotFoundError()

    currency = currency or 'USD'
    provider_payment_intent_id = get_payment_provider().create_payment_intent(
        amount_cents=amount_cents,
        currency=currency,
    )

    intent = PaymentIntent.objects.create(
        user=user,
        rental_id=rental_id,
        subscription_id=subscription_id,
        amount_cents=amount_cents,
        currency=currency,
        payment_method_id=payment_method_id,
        provider_payment_intent_id=provider_payment_intent_id,
        metadata=metadata or {},
    )

    logger.info("Payment intent %s created for user %s", intent.id, user.id)
    return intent


def get_payment_intent(*, user: User, payment_intent_id: UUID) -> PaymentIntent:
    """
    Raises:
        PaymentIntentNotFoundError: If it doesn't exist or isn't the user's
    """
    try:
        return PaymentIntent.objects.get(id=payment_intent_id, user=user)
    except PaymentIntent.DoesNotExist:
        raise PaymentIntentNotFoundError()


def get_user_payment_intents(
    *,
    user: User,
    status: Optional[str] = None,
    payment_type: Optional[str] = None
) -> QuerySet[PaymentIntent]:
    """
    List a user's payment intents, newest first.

    ``payment_type`` is ``rental`` or ``subscription`` and selects by what
    the intent pays for.
    """
    queryset = PaymentIntent.objects.filter(user=user)
    if status:
        queryset = queryset.filter(status=status)
    if payment_type == 'rental':
        queryset = queryset.filter(rental__isnull=False)
    elif payment_type == 'subscription':
        queryset = queryset.filter(subscription__isnull=False)
    return queryset.order_by('-created_at')


@transaction.atomic
def confirm_payment_intent(
    *,
    user: User,
    payment_intent_id: UUID,
    payment_method_id: Optional[UUID] = None
) -> PaymentIntent:
    """
    Charge a pending intent and record the charge transaction.

    A charge the provider rejects leaves the intent ``failed`` with a failed
    transaction holding the reason; it is returned, not raised.

    Falls back to the payment method stored on the intent when none is
    given.

    Raises:
        PaymentIntentNotFoundError: If it doesn't exist or isn't the user's
        PaymentIntentNotPendingError: If it was already processed
        PaymentMethodRequiredError: If no payment method is available
        PaymentMethodNotFoundError: If the method isn't the user's or is inactive
    """
    try:
        intent = PaymentIntent.objects.select_for_update().get(id=payment_intent_id, user=user)
    except PaymentIntent.DoesNotExist:
        raise PaymentIntentNotFoundError()

    if intent.status != PaymentIntentStatus.PENDING:
        raise PaymentIntentNotPendingError()

    payment_method_id = payment_method_id or intent.payment_method_id
    if payment_method_id is None:
        raise PaymentMethodRequiredError()

    try:
        payment_method = PaymentMethod.objects.get(id=payment_method_id, user=user, is_active=True)
    except PaymentMethod.DoesNotExist:
        raise PaymentMethodNotFoundError()

    provider = get_payment_provider()
    try:
        charge_id = provider.confirm_payment_intent(
            provider_payment_intent_id=intent.provider_payment_intent_id,
            provider_payment_method_id=payment_method.provider_payment_method_id,
        )
    except PaymentProviderError as e:
        intent.status = PaymentIntentStatus.FAILED
        intent.payment_method = payment_method
        intent.save(update_fields=['status', 'payment_method', 'updated_at'])

        PaymentTransaction.objects.create(
            payment_intent=intent,
            transaction_type=TransactionType.CHARGE,
            amount_cents=intent.amount_cents,
            currency=intent.currency,
            status=PaymentIntentStatus.FAILED,
            failure_reason=str(e),
        )

        logger.warning("Payment intent %s failed: %s", intent.id, e)
        return intent

    intent.status = PaymentIntentStatus.SUCCEEDED
    intent.provider_charge_id = charge_id
    intent.payment_method = payment_method
    intent.save(update_fields=['status', 'provider_charge_id', 'payment_method', 'updated_at'])

    PaymentTransaction.objects.create(
        payment_intent=intent,
        transaction_type=TransactionType.CHARGE,
        amount_cents=intent.amount_cents,
        currency=intent.currency,
        status=PaymentIntentStatus.SUCCEEDED,
        provider_transaction_id=charge_id,
    )

    logger.info("Payment intent %s succeeded (%s)", intent.id, charge_id)
    return intent
