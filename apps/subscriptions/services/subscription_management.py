"""Subscription lifecycle and usage services."""

import logging
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import F, QuerySet
from django.contrib.auth import get_user_model
from django.utils import timezone

from apps.payments.providers import get_payment_provider
from ..models import (
    BillingCycle,
    Subscription,
    SubscriptionPlan,
    SubscriptionStatus,
    SubscriptionUsage,
    UsageType,
)
from .exceptions import (
    ActiveSubscriptionExistsError,
    InvalidBillingCycleError,
    PlanNotFoundError,
    SubscriptionNotActiveError,
    SubscriptionNotFoundError,
)

User = get_user_model()
logger = logging.getLogger(__name__)

PERIOD_LENGTHS = {
    BillingCycle.MONTHLY: timedelta(days=30),
    BillingCycle.YEARLY: timedelta(days=365),
}


def compute_period_end(start: datetime, billing_cycle: str) -> datetime:
    """
    Return the end of a billing period starting at ``start``.

    Raises:
        InvalidBillingCycleError: If billing_cycle is not monthly/yearly
    """
    try:
        return start + PERIOD_LENGTHS[billing_cycle]
    except KeyError:
        raise InvalidBillingCycleError()


def list_plans() -> QuerySet[SubscriptionPlan]:
    return SubscriptionPlan.objects.filter(is_active=True).order_by('price_cents')


def get_plan(*, plan_id: UUID) -> SubscriptionPlan:
    """
    Raises:
        PlanNotFoundError: If plan doesn't exist or is inactive
    """
    try:
        return SubscriptionPlan.objects.get(id=plan_id, is_active=True)
    except SubscriptionPlan.DoesNotExist:
        raise PlanNotFoundError()


@transaction.atomic
def create_subscription(*, user: User, plan_id: UUID) -> Subscription:
    """
    Subscribe a user to a plan.

    The user row is locked so two concurrent requests cannot both create
    an active subscription.

    Args:
        user: Subscribing user
        plan_id: Plan UUID

    Returns:
        Created Subscription with its usage rows

    Raises:
        PlanNotFoundError: If plan doesn't exist or is inactive
        ActiveSubscriptionExistsError: If user already has an active subscription
        InvalidBillingCycleError: If the plan has an unknown billing cycle
    """
    plan = get_plan(plan_id=plan_id)

    User.objects.select_for_update().get(id=user.id)
    if Subscription.objects.filter(user=user, status=SubscriptionStatus.ACTIVE).exists():
        raise ActiveSubscriptionExistsError()

    period_start = timezone.now()
    period_end = compute_period_end(period_start, plan.billing_cycle)

    provider_subscription_id = get_payment_provider().create_subscription(
        customer_id=str(user.id),
        price_id=str(plan.id),
    )

    subscription = Subscription.objects.create(
        user=user,
        plan=plan,
        status=SubscriptionStatus.ACTIVE,
        current_period_start=period_start,
        current_period_end=period_end,
        provider_subscription_id=provider_subscription_id,
    )

    SubscriptionUsage.objects.bulk_create([
        SubscriptionUsage(
            subscription=subscription,
            usage_type=UsageType.LISTINGS,
            usage_limit=plan.max_listings,
            period_start=period_start,
            period_end=period_end,
        ),
        SubscriptionUsage(
            subscription=subscription,
            usage_type=UsageType.RENTALS,
            usage_limit=plan.max_rentals_per_month,
            period_start=period_start,
            period_end=period_end,
        ),
    ])

    logger.info("User %s subscribed to plan %s (%s)", user.id, plan.id, subscription.id)
    return subscription


def get_subscription(*, user: User, subscription_id: UUID) -> Subscription:
    """
    Raises:
        SubscriptionNotFoundError: If it doesn't exist or isn't the user's
    """
    try:
        return Subscription.objects.select_related('plan').get(id=subscription_id, user=user)
    except Subscription.DoesNotExist:
        raise SubscriptionNotFoundError()


def get_user_subscriptions(*, user: User, status: Optional[str] = None) -> QuerySet[Subscription]:
    queryset = Subscription.objects.filter(user=user).select_related('plan')
    if status:
        queryset = queryset.filter(status=status)
    return queryset.order_by('-created_at')


@transaction.atomic
def cancel_subscription(
    *,
    user: User,
    subscription_id: UUID,
    cancel_at_period_end: bool = True
) -> Subscription:
    """
    Cancel a subscription now or at the end of the current period.

    Args:
        user: Subscription owner
        subscription_id: Subscription UUID
        cancel_at_period_end: If False, cancel immediately

    Returns:
        Updated Subscription

    Raises:
        SubscriptionNotFoundError: If it doesn't exist or isn't the user's
        SubscriptionNotActiveError: If it is not active
    """
    try:
        subscription = (
            Subscription.objects
            .select_for_update()
            .get(id=subscription_id, user=user)
        )
    except Subscription.DoesNotExist:
        raise SubscriptionNotFoundError()

    if subscription.status != SubscriptionStatus.ACTIVE:
        raise SubscriptionNotActiveError()

    if cancel_at_period_end:
        subscription.cancel_at_period_end = True
        subscription.save(update_fields=['cancel_at_period_end', 'updated_at'])
    else:
        if subscription.provider_subscription_id:
            get_payment_provider().cancel_subscription(
                provider_subscription_id=subscription.provider_subscription_id
            )
        subscription.status = SubscriptionStatus.CANCELED
        subscription.canceled_at = timezone.now()
        subscription.save(update_fields=['status', 'canceled_at', 'updated_at'])

    logger.info(
        "Subscription %s canceled (at_period_end=%s)",
        subscription.id,
        cancel_at_period_end,
    )
    return subscription


def get_subscription_usage(*, user: User, subscription_id: UUID) -> QuerySet[SubscriptionUsage]:
    """
    Raises:
        SubscriptionNotFoundError: If it doesn't exist or isn't the user's
    """
    subscription = get_subscription(user=user, subscription_id=subscription_id)
    return subscription.usage.order_by('usage_type', '-period_start')


def record_usage(*, user: User, usage_type: str) -> int:
    """
    Count one unit of usage against the user's active subscription.

    Users without an active subscription are not tracked. Limits are not
    enforced here.

    Returns:
        Number of usage rows updated (0 or 1)
    """
    now = timezone.now()
    return SubscriptionUsage.objects.filter(
        subscription__user=user,
        subscription__status=SubscriptionStatus.ACTIVE,
        usage_type=usage_type,
        period_start__lte=now,
        period_end__gt=now,
    ).update(usage_count=F('usage_count') + 1, updated_at=now)
