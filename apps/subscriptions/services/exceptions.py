"""Domain-specific exceptions for subscription services."""

from apps.core.exceptions import ConflictError, InvalidStateError, NotFoundError


class SubscriptionsServiceError(Exception):
    """Base exception for subscription services."""
    pass


class PlanNotFoundError(SubscriptionsServiceError, NotFoundError):
    default_detail = 'Subscription plan not found'


class SubscriptionNotFoundError(SubscriptionsServiceError, NotFoundError):
    default_detail = 'Subscription not found'


class ActiveSubscriptionExistsError(SubscriptionsServiceError, ConflictError):
    default_detail = 'User already has an active subscription'


class InvalidBillingCycleError(SubscriptionsServiceError, InvalidStateError):
    default_detail = 'Invalid billing cycle'


class SubscriptionNotActiveError(SubscriptionsServiceError, InvalidStateError):
    default_detail = 'Subscription is not active'
