import pytest
from django.urls import reverse
from rest_framework import status


# =============================================================================
# Payment Method Tests
# =============================================================================

@pytest.mark.django_db
class TestPaymentMethodEndpoints:
    """Tests for /api/v1/payment/payment-methods/"""

    def test_create_and_list(self, payer_client):
        url = reverse('payments:payment-method-list')
        data = {
            'payment_type': 'card',
            'provider': 'stripe',
            'provider_payment_method_id': 'pm_123',
            'is_default': True,
        }
        created = payer_client.post(url, data)
        listed = payer_client.get(url)

        assert created.status_code == status.HTTP_201_CREATED
        assert created.data['is_default'] is True
        assert listed.data['total'] == 1
        assert listed.data['payment_methods'][0]['provider_payment_method_id'] == 'pm_123'

    def test_invalid_type(self, payer_client):
        url = reverse('payments:payment-method-list')
        data = {'payment_type': 'cheque', 'provider': 'stripe', 'provider_payment_method_id': 'x'}
        response = payer_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'data': None, 'error': 'Invalid payment type'}

    def test_requires_auth(self, api_client):
        response = api_client.get(reverse('payments:payment-method-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Payment Intent Tests
# =============================================================================

@pytest.mark.django_db
class TestPaymentIntentEndpoints:
    """Tests for /api/v1/payment/payment-intents/"""

    def test_create_for_rental(self, payer_client, rental):
        url = reverse('payments:payment-intent-list')
        response = payer_client.post(url, {'rental_id': str(rental.id), 'amount_cents': 14000})

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 'pending'
        assert response.data['currency'] == 'USD'
        assert response.data['provider_payment_intent_id'] == 'pi_mock_14000_USD'

    def test_create_without_target(self, payer_client):
        url = reverse('payments:payment-intent-list')
        response = payer_client.post(url, {'amount_cents': 100})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == 'Must specify either rental_id or subscription_id'

    def test_create_for_foreign_rental(self, stranger_client, rental):
        url = reverse('payments:payment-intent-list')
        response = stranger_client.post(url, {'rental_id': str(rental.id), 'amount_cents': 100})

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_list_only_own(self, payer_client, stranger_client, rental, subscription):
        url = reverse('payments:payment-intent-list')
        payer_client.post(url, {'rental_id': str(rental.id), 'amount_cents': 100})
        payer_client.post(url, {'subscription_id': str(subscription.id), 'amount_cents': 999})

        mine = payer_client.get(url, {'payment_type': 'subscription'})
        theirs = stranger_client.get(url)

        assert mine.data['total'] == 1
        assert mine.data['payment_intents'][0]['subscription_id'] == str(subscription.id)
        assert theirs.data['total'] == 0

    def test_detail_of_other_user_is_404(self, payer_client, stranger_client, rental):
        created = payer_client.post(
            reverse('payments:payment-intent-list'),
            {'rental_id': str(rental.id), 'amount_cents': 100},
        )
        url = reverse('payments:payment-intent-detail', kwargs={'payment_intent_id': created.data['id']})

        assert payer_client.get(url).status_code == status.HTTP_200_OK
        response = stranger_client.get(url)
        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['error'] == 'Payment intent not found'

    def test_confirm(self, payer_client, rental, card):
        created = payer_client.post(
            reverse('payments:payment-intent-list'),
            {'rental_id': str(rental.id), 'amount_cents': 100},
        )
        url = reverse('payments:payment-intent-confirm', kwargs={'payment_intent_id': created.data['id']})

        response = payer_client.post(url, {'payment_method_id': str(card.id)})
        again = payer_client.post(url, {'payment_method_id': str(card.id)})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'succeeded'
        assert again.status_code == status.HTTP_400_BAD_REQUEST
        assert again.json()['error'] == 'Payment intent is not in pending status'

    def test_confirm_without_method(self, payer_client, rental):
        created = payer_client.post(
            reverse('payments:payment-intent-list'),
            {'rental_id': str(rental.id), 'amount_cents': 100},
        )
        url = reverse('payments:payment-intent-confirm', kwargs={'payment_intent_id': created.data['id']})
        response = payer_client.post(url, {})

        assert response.json()['error'] == 'Payment method is required'


@pytest.mark.django_db
def test_ping(api_client):
    response = api_client.get(reverse('payments:ping'))

    assert response.json() == {'data': {'module': 'payment', 'status': 'pong'}, 'error': None}
