"""Payment services."""

from .payment_processing import (
    create_payment_method,
    get_user_payment_methods,
    create_payment_intent,
    get_payment_intent,
    get_user_payment_intents,
    confirm_payment_intent,
)
from .exceptions import (
    PaymentsServiceError,
    InvalidPaymentTypeError,
    InvalidPaymentProviderError,
    InvalidPaymentTargetError,
    PaymentTargetNotFoundError,
    PaymentTargetPermissionError,
    PaymentIntentNotFoundError,
    PaymentIntentNotPendingError,
    PaymentMethodRequiredError,
    PaymentMethodNotFoundError,
)

__all__ = [
    'create_payment_method',
    'get_user_payment_methods',
    'create_payment_intent',
    'get_payment_intent',
    'get_user_payment_intents',
    'confirm_payment_intent',
    'PaymentsServiceError',
    'InvalidPaymentTypeError',
    'InvalidPaymentProviderError',
    'InvalidPaymentTargetError',
    'PaymentTargetNotFoundError',
    'PaymentTargetPermissionError',
    'PaymentIntentNotFoundError',
    'PaymentIntentNotPendingError',
    'PaymentMethodRequiredError',
    'PaymentMethodNotFoundError',
]
