"""Subscription services."""

from .subscription_management import (
    compute_period_end,
    list_plans,
    get_plan,
    create_subscription,
    get_subscription,
    get_user_subscriptions,
    cancel_subscription,
    get_subscription_usage,
    record_usage,
)
from .exceptions import (
    SubscriptionsServiceError,
    PlanNotFoundError,
    SubscriptionNotFoundError,
    ActiveSubscriptionExistsError,
    InvalidBillingCycleError,
    SubscriptionNotActiveError,
)

__all__ = [
    'compute_period_end',
    'list_plans',
    'get_plan',
    'create_subscription',
    'get_subscription',
    'get_user_subscriptions',
    'cancel_subscription',
    'get_subscription_usage',
    'record_usage',
    'SubscriptionsServiceError',
    'PlanNotFoundError',
    'SubscriptionNotFoundError',
    'ActiveSubscriptionExistsError',
    'InvalidBillingCycleError',
    'SubscriptionNotActiveError',
]
