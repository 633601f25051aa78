"""Domain-specific exceptions for payment services."""

from apps.core.exceptions import ForbiddenError, InvalidStateError, NotFoundError


class PaymentsServiceError(Exception):
    """Base exception for payment services."""
    pass


class InvalidPaymentTypeError(PaymentsServiceError, InvalidStateError):
    default_detail = 'Invalid payment type'


class InvalidPaymentProviderError(PaymentsServiceError, InvalidStateError):
    default_detail = 'Invalid payment provider'


class InvalidPaymentTargetError(PaymentsServiceError, InvalidStateError):
    """Amount or rental/subscription reference is invalid."""
    default_detail = 'Must specify either rental_id or subscription_id'


class PaymentTargetNotFoundError(PaymentsServiceError, NotFoundError):
    default_detail = 'Rental not found'


class PaymentTargetPermissionError(PaymentsServiceError, ForbiddenError):
    default_detail = 'You can only create payment intents for your own rentals'


class PaymentIntentNotFoundError(PaymentsServiceError, NotFoundError):
    default_detail = 'Payment intent not found'


class PaymentIntentNotPendingError(PaymentsServiceError, InvalidStateError):
    default_detail = 'Payment intent is not in pending status'


class PaymentMethodRequiredError(PaymentsServiceError, InvalidStateError):
    default_detail = 'Payment method is required'


class PaymentMethodNotFoundError(PaymentsServiceError, NotFoundError):
    default_detail = 'Payment method not found'
