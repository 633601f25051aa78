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
def staff(db):
    return User.objects.create_user(
        email='moderator@example.com',
        password='TestPass123!',
        is_staff=True,
    )


@pytest.fixture
def member(db):
    return User.objects.create_user(email='member@example.com', password='TestPass123!')


@pytest.fixture
def staff_client(staff):
    return _client_for(staff)


@pytest.fixture
def member_client(member):
    return _client_for(member)


@pytest.fixture
def pending_product(member):
    return Product.objects.create(
        owner=member,
        category=Category.objects.create(name='Music'),
        name='Electric Guitar',
        daily_price=Decimal('20.00'),
        status=ProductStatus.INACTIVE,
    )
