import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.products.models import Category, Product
from apps.rentals.models import Rental


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def owner(db):
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        first_name='Olivia',
    )


@pytest.fixture
def renter(db):
    return User.objects.create_user(
        email='renter@example.com',
        password='TestPass123!',
        first_name='Ryan',
    )


@pytest.fixture
def outsider(db):
    return User.objects.create_user(email='outsider@example.com', password='TestPass123!')


@pytest.fixture
def owner_client(owner):
    return _client_for(owner)


@pytest.fixture
def renter_client(renter):
    return _client_for(renter)


@pytest.fixture
def outsider_client(outsider):
    return _client_for(outsider)


@pytest.fixture
def rental(db, owner, renter):
    product = Product.objects.create(
        owner=owner,
        category=Category.objects.create(name='Camping'),
        name='Two-person Tent',
        daily_price=Decimal('8.00'),
    )
    return Rental.objects.create(
        product=product,
        renter=renter,
        rental_period_start=datetime(2030, 7, 1, tzinfo=dt_timezone.utc),
        rental_period_end=datetime(2030, 7, 4, tzinfo=dt_timezone.utc),
    )


@pytest.fixture
def conversation(rental, renter):
    """Conversation opened by the renter with one message."""
    from apps.messaging.services import create_conversation
    return create_conversation(user=renter, rental_id=rental.id, message='Is the tent waterproof?')
