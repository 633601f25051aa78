import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.products.models import Category, Product
from apps.rentals.models import Rental


def at(day, hour=10):
    """Timestamp in June 2030 (UTC)."""
    return datetime(2030, 6, day, hour, tzinfo=dt_timezone.utc)


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def owner(db):
    return User.objects.create_user(
        email='owner@example.com',
        password='TestPass123!',
        first_name='Olivia',
        last_name='Owner',
    )


@pytest.fixture
def renter(db):
    return User.objects.create_user(
        email='renter@example.com',
        password='TestPass123!',
        first_name='Ryan',
        last_name='Renter',
    )


@pytest.fixture
def stranger(db):
    return User.objects.create_user(
        email='stranger@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def owner_client(owner):
    return _client_for(owner)


@pytest.fixture
def renter_client(renter):
    """Return API client authenticated as the renter."""
    return _client_for(renter)


@pytest.fixture
def stranger_client(stranger):
    return _client_for(stranger)


@pytest.fixture
def category(db):
    return Category.objects.create(name='Tools')


@pytest.fixture
def product(db, owner, category):
    return Product.objects.create(
        owner=owner,
        category=category,
        name='Cordless Drill',
        daily_price=Decimal('12.50'),
    )


@pytest.fixture
def rental(db, product, renter):
    """A requested rental from the 10th to the 12th."""
    return Rental.objects.create(
        product=product,
        renter=renter,
        rental_period_start=at(10),
        rental_period_end=at(12),
    )
