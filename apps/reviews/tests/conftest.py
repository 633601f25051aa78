import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.products.models import Category, Product, ProductStatus
from apps.rentals.models import Rental


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
def category(db):
    return Category.objects.create(name='Tools')


@pytest.fixture
def product(owner, category):
    return Product.objects.create(
        owner=owner,
        category=category,
        name='Cordless Drill',
        daily_price=Decimal('12.50'),
    )


@pytest.fixture
def inactive_product(owner, category):
    return Product.objects.create(
        owner=owner,
        category=category,
        name='Broken Sander',
        daily_price=Decimal('5.00'),
        status=ProductStatus.INACTIVE,
    )


@pytest.fixture
def rental(product, renter):
    return Rental.objects.create(
        product=product,
        renter=renter,
        rental_period_start=datetime(2030, 8, 1, tzinfo=dt_timezone.utc),
        rental_period_end=datetime(2030, 8, 3, tzinfo=dt_timezone.utc),
    )
