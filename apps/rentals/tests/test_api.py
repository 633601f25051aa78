import pytest
from django.urls import reverse
from rest_framework import status
from apps.rentals.models import Rental, RentalStatus
from apps.subscriptions.models import Subscription, SubscriptionPlan, SubscriptionUsage
from apps.subscriptions.services import create_subscription
from .conftest import at


# =============================================================================
# Create Rental Tests
# =============================================================================

@pytest.mark.django_db
class TestCreateRental:
    """Tests for POST /api/v1/rental/rentals/"""

    def _payload(self, product, start=1, end=3, **extra):
        return {
            'product_id': str(product.id),
            'rental_period_start': at(start).isoformat(),
            'rental_period_end': at(end).isoformat(),
            **extra,
        }

    def test_create_success(self, renter_client, renter, product):
        response = renter_client.post(reverse('rentals:rental-list'), self._payload(product))

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['message'] == 'Rental request created successfully'
        rental = Rental.objects.get(id=response.data['rental_id'])
        assert rental.renter == renter
        assert rental.status == RentalStatus.REQUESTED

    def test_create_conflict(self, renter_client, product, rental):
        response = renter_client.post(
            reverse('rentals:rental-list'),
            self._payload(product, start=11, end=13)
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {
            'data': None,
            'error': 'Product is not available for the selected dates',
        }

    def test_create_own_product(self, owner_client, product):
        response = owner_client.post(reverse('rentals:rental-list'), self._payload(product))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == 'Cannot rent your own product'

    def test_create_unknown_product(self, renter_client, product):
        payload = self._payload(product)
        payload['product_id'] = '00000000-0000-0000-0000-000000000000'
        response = renter_client.post(reverse('rentals:rental-list'), payload)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['error'] == 'Product not found'

    def test_create_deleted_product(self, renter_client, product):
        product.status = 'deleted'
        product.save()

        response = renter_client.post(reverse('rentals:rental-list'), self._payload(product))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == 'Product is not available for rental'

    def test_create_end_before_start(self, renter_client, product):
        response = renter_client.post(
            reverse('rentals:rental-list'),
            self._payload(product, start=5, end=2)
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert Rental.objects.count() == 0

    def test_create_missing_dates(self, renter_client, product):
        response = renter_client.post(
            reverse('rentals:rental-list'),
            {'product_id': str(product.id)}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'rental_period_start' in response.json()['error']

    def test_create_requires_auth(self, api_client, product):
        response = api_client.post(reverse('rentals:rental-list'), self._payload(product))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_create_counts_subscription_usage(self, renter_client, renter, product):
        plan = SubscriptionPlan.objects.create(name='Basic', price_cents=999, max_rentals_per_month=3)
        subscription = create_subscription(user=renter, plan_id=plan.id)

        renter_client.post(reverse('rentals:rental-list'), self._payload(product))

        usage = SubscriptionUsage.objects.get(subscription=subscription, usage_type='rentals')
        assert usage.usage_count == 1
        assert Subscription.objects.get(id=subscription.id).status == 'active'


# =============================================================================
# Read Rental Tests
# =============================================================================

@pytest.mark.django_db
class TestReadRentals:
    """Tests for GET /api/v1/rental/rentals/ and /rentals/{id}/"""

    def test_detail_for_renter(self, renter_client, rental, product):
        url = reverse('rentals:rental-detail', kwargs={'rental_id': rental.id})
        response = renter_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['rental_id'] == str(rental.id)
        assert response.data['product'] == {
            'product_id': str(product.id),
            'name': 'Cordless Drill',
            'daily_price': 12.5,
            'owner_id': str(product.owner_id),
        }

    def test_detail_for_owner(self, owner_client, rental):
        url = reverse('rentals:rental-detail', kwargs={'rental_id': rental.id})
        response = owner_client.get(url)

        assert response.status_code == status.HTTP_200_OK

    def test_detail_hidden_from_stranger(self, stranger_client, rental):
        url = reverse('rentals:rental-detail', kwargs={'rental_id': rental.id})
        response = stranger_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()['error'] == 'Rental not found'

    def test_list_envelope_and_pagination(self, renter_client, rental):
        response = renter_client.get(reverse('rentals:rental-list'))

        body = response.json()
        assert body['error'] is None
        assert body['data']['total'] == 1
        assert body['data']['page'] == 1
        assert body['data']['per_page'] == 20
        assert body['data']['rentals'][0]['rental_id'] == str(rental.id)

    def test_list_per_page_capped(self, renter_client, rental):
        response = renter_client.get(reverse('rentals:rental-list'), {'per_page': 500})

        assert response.data['per_page'] == 100

    def test_list_page_past_the_end(self, renter_client, rental):
        response = renter_client.get(reverse('rentals:rental-list'), {'page': 3})

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'rentals': [], 'total': 1, 'page': 3, 'per_page': 20}

    def test_list_status_filter(self, owner_client, rental):
        response = owner_client.get(reverse('rentals:rental-list'), {'status': 'confirmed'})

        assert response.data['total'] == 0
        assert response.data['rentals'] == []

    def test_list_empty_for_stranger(self, stranger_client, rental):
        response = stranger_client.get(reverse('rentals:rental-list'))

        assert response.data['total'] == 0


# =============================================================================
# Update Rental Tests
# =============================================================================

@pytest.mark.django_db
class TestUpdateRental:
    """Tests for PUT/PATCH /api/v1/rental/rentals/{id}/"""

    def test_owner_confirms(self, owner_client, rental):
        url = reverse('rentals:rental-detail', kwargs={'rental_id': rental.id})
        response = owner_client.put(url, {'status': 'confirmed'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'confirmed'

    def test_renter_cannot_change_status(self, renter_client, rental):
        url = reverse('rentals:rental-detail', kwargs={'rental_id': rental.id})
        response = renter_client.patch(url, {'status': 'confirmed'})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()['error'] == 'Only product owner can update rental status'

    def test_renter_updates_notes(self, renter_client, rental):
        url = reverse('rentals:rental-detail', kwargs={'rental_id': rental.id})
        response = renter_client.patch(url, {'pickup_notes': 'Call on arrival'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['pickup_notes'] == 'Call on arrival'

    def test_skip_state_rejected(self, owner_client, rental):
        url = reverse('rentals:rental-detail', kwargs={'rental_id': rental.id})
        response = owner_client.put(url, {'status': 'completed'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == 'Invalid status transition from requested to completed'

    def test_unknown_status_value(self, owner_client, rental):
        url = reverse('rentals:rental-detail', kwargs={'rental_id': rental.id})
        response = owner_client.put(url, {'status': 'lost'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'].startswith('status:')

    def test_stranger_update_not_found(self, stranger_client, rental):
        url = reverse('rentals:rental-detail', kwargs={'rental_id': rental.id})
        response = stranger_client.patch(url, {'pickup_notes': 'x'})

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Availability Tests
# =============================================================================

@pytest.mark.django_db
class TestAvailability:
    """Tests for POST /api/v1/rental/availability/"""

    def _check(self, client, product, start, end):
        return client.post(reverse('rentals:availability'), {
            'product_id': str(product.id),
            'start_date': at(start).isoformat(),
            'end_date': at(end).isoformat(),
        })

    def test_anonymous_available(self, api_client, product):
        response = self._check(api_client, product, 1, 3)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'data': {'available': True, 'conflicting_rentals': []},
            'error': None,
        }

    def test_conflict_listed(self, api_client, product, rental):
        response = self._check(api_client, product, 11, 15)

        assert response.data['available'] is False
        conflict = response.data['conflicting_rentals'][0]
        assert conflict['rental_id'] == str(rental.id)
        assert conflict['status'] == 'requested'
        assert set(conflict) == {'rental_id', 'start_date', 'end_date', 'status'}

    def test_repeated_check_is_identical(self, api_client, product, rental):
        first = self._check(api_client, product, 11, 15)
        second = self._check(api_client, product, 11, 15)

        assert first.status_code == second.status_code == status.HTTP_200_OK
        assert first.json() == second.json()
        assert Rental.objects.filter(product=product).count() == 1

    def test_unknown_product(self, api_client, product):
        response = api_client.post(reverse('rentals:availability'), {
            'product_id': '00000000-0000-0000-0000-000000000000',
            'start_date': at(1).isoformat(),
            'end_date': at(2).isoformat(),
        })

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_inverted_period(self, api_client, product):
        response = self._check(api_client, product, 4, 2)

        assert response.status_code == status.HTTP_400_BAD_REQUEST


@pytest.mark.django_db
def test_ping(api_client):
    response = api_client.get(reverse('rentals:ping'))

    assert response.json() == {'data': {'module': 'rental', 'status': 'pong'}, 'error': None}
