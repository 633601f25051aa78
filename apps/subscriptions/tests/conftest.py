import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.subscriptions.models import SubscriptionPlan


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def subscriber(db):
    return User.objects.create_user(
        email='subscriber@example.com',
        password='TestPass123!',
        first_name='Sub',
    )


@pytest.fixture
def other_subscriber(db):
    return User.objects.create_user(
        email='other.subscriber@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def subscriber_client(subscriber):
    """Return API client authenticated as the subscriber."""
    client = APIClient()
    refresh = RefreshToken.for_user(subscriber)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def other_client(other_subscriber):
    client = APIClient()
    refresh = RefreshToken.for_user(other_subscriber)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def monthly_plan(db):
    return SubscriptionPlan.objects.create(
        name='Pro',
        price_cents=1999,
        billing_cycle='monthly',
        max_listings=10,
        max_rentals_per_month=5,
    )


@pytest.fixture
def yearly_plan(db):
    return SubscriptionPlan.objects.create(
        name='Pro Yearly',
        price_cents=19900,
        billing_cycle='yearly',
    )


@pytest.fixture
def retired_plan(db):
    return SubscriptionPlan.objects.create(
        name='Legacy',
        price_cents=500,
        is_active=False,
    )
