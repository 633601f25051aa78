import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.notifications.models import Notification


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def notified_user(db):
    return User.objects.create_user(
        email='notified@example.com',
        password='TestPass123!',
        first_name='Notified',
    )


@pytest.fixture
def stranger(db):
    return User.objects.create_user(
        email='stranger@example.com',
        password='TestPass123!',
        first_name='Stranger',
    )


@pytest.fixture
def staff_user(db):
    return User.objects.create_user(
        email='staff@example.com',
        password='TestPass123!',
        is_staff=True,
    )


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def notified_client(notified_user):
    """Return API client authenticated as the notified user."""
    return _client_for(notified_user)


@pytest.fixture
def stranger_client(stranger):
    return _client_for(stranger)


@pytest.fixture
def staff_client(staff_user):
    return _client_for(staff_user)


@pytest.fixture
def notification(db, notified_user):
    return Notification.objects.create(
        user=notified_user,
        title='Rental requested',
        message='Someone wants to rent your drill',
        category='rental',
        data={'rental_id': 'abc'},
    )
