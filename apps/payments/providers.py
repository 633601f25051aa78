"""
Payment provider gateway.

The active provider class is configured with ``PAYMENT_PROVIDER_CLASS``.
The bundled ``MockPaymentProvider`` fabricates deterministic ids so the
whole payment flow works without talking to Stripe/PayPal/Square.
"""
from django.conf import settings
from django.utils.module_loading import import_string


class PaymentProviderError(Exception):
    """Raised when the provider rejects or fails an operation."""
    pass


class MockPaymentProvider:
    """
    Provider stand-in.

    Charges succeed except for the ``pm_card_declined`` test method, which
    is rejected like a declined card.
    """

    declined_payment_methods = {"pm_card_declined"}

    def create_payment_intent(self, *, amount_cents: int, currency: str) -> str:
        return f"pi_mock_{amount_cents}_{currency}"

    def confirm_payment_intent(
        self,
        *,
        provider_payment_intent_id: str,
        provider_payment_method_id: str
    ) -> str:
        """Charge the intent and return the provider charge id."""
        if provider_payment_method_id in self.declined_payment_methods:
            raise PaymentProviderError("Your card was declined")
        return f"ch_mock_{provider_payment_intent_id}_{provider_payment_method_id}"

    def create_subscription(self, *, customer_id: str, price_id: str) -> str:
        return f"sub_mock_{customer_id}_{price_id}"

    def cancel_subscription(self, *, provider_subscription_id: str) -> None:
        return None


def get_payment_provider():
    """Instantiate the configured provider."""
    provider_path = getattr(
        settings,
        'PAYMENT_PROVIDER_CLASS',
        'apps.payments.providers.MockPaymentProvider'
    )
    return import_string(provider_path)()
