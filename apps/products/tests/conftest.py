import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.products.models import Category, Product, ProductStatus


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
    return User.objects.create_user(email='owner@example.com', password='TestPass123!')


@pytest.fixture
def other_user(db):
    return User.objects.create_user(email='other@example.com', password='TestPass123!')


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(email='staff@example.com', password='TestPass123!', is_staff=True)


@pytest.fixture
def owner_client(owner):
    return _client_for(owner)


@pytest.fixture
def other_client(other_user):
    return _client_for(other_user)


@pytest.fixture
def staff_client(staff_user):
    return _client_for(staff_user)


@pytest.fixture
def category(db):
    return Category.objects.create(name='Photography')


@pytest.fixture
def product(owner, category):
    """Active product with a couple of tags."""
    from apps.products.services import create_product
    return create_product(
        owner=owner,
        name='Mirrorless Camera',
        description='Full frame body with 24-70mm lens',
        category_id=category.id,
        daily_price=Decimal('45.00'),
        tags=['Camera', ' video '],
        images=['https://img.example.com/1.jpg', 'https://img.example.com/2.jpg'],
    )


@pytest.fixture
def paused_product(owner, category):
    return Product.objects.create(
        owner=owner,
        category=category,
        name='Old Tripod',
        daily_price=Decimal('3.00'),
        status=ProductStatus.INACTIVE,
    )
