import pytest
from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.payments.models import PaymentMethod
from apps.products.models import Category, Product
from apps.rentals.models import Rental
from apps.subscriptions.models import Subscription, SubscriptionPlan


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def payer(db):
    return User.objects.create_user(email='payer@example.com', password='TestPass123!')


@pytest.fixture
def stranger(db):
    return User.objects.create_user(email='stranger@example.com', password='TestPass123!')


@pytest.fixture
def payer_client(payer):
    return _client_for(payer)


@pytest.fixture
def stranger_client(stranger):
    return _client_for(stranger)


@pytest.fixture
def rental(db, payer):
    owner = User.objects.create_user(email='lender@example.com', password='TestPass123!')
    product = Product.objects.create(
        owner=owner,
        category=Category.objects.create(name='Outdoors'),
        name='Kayak',
        daily_price=Decimal('35.00'),
    )
    return Rental.objects.create(
        product=product,
        renter=payer,
        rental_period_start=datetime(2030, 9, 1, tzinfo=dt_timezone.utc),
        rental_period_end=datetime(2030, 9, 5, tzinfo=dt_timezone.utc),
    )


@pytest.fixture
def subscription(db, payer):
    now = timezone.now()
    plan = SubscriptionPlan.objects.create(name='Starter', price_cents=999)
    return Subscription.objects.create(
        user=payer,
        plan=plan,
        current_period_start=now,
        current_period_end=now + timedelta(days=30),
    )


@pytest.fixture
def card(payer):
    return PaymentMethod.objects.create(
        user=payer,
        payment_type='card',
        provider='stripe',
        provider_payment_method_id='pm_card_visa',
        is_default=True,
    )
