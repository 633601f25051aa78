import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User


# =============================================================================
# Signup Tests
# =============================================================================

@pytest.mark.django_db
class TestSignup:
    """Tests for POST /api/v1/auth/signup/"""

    def test_signup_success(self, api_client):
        """Successfully register a new user."""
        url = reverse('auth:signup')
        data = {
            'email': 'newuser@example.com',
            'password': 'SecurePass123!',
            'first_name': 'New',
            'last_name': 'User',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_201_CREATED
        assert 'access_token' in response.data
        assert 'refresh_token' in response.data
        assert response.data['user']['email'] == 'newuser@example.com'
        assert User.objects.filter(email='newuser@example.com').exists()

    def test_signup_response_is_enveloped(self, api_client):
        """Payload is wrapped in the data/error envelope."""
        url = reverse('auth:signup')
        data = {'email': 'wrapped@example.com', 'password': 'SecurePass123!'}
        response = api_client.post(url, data)

        body = response.json()
        assert body['error'] is None
        assert body['data']['user']['email'] == 'wrapped@example.com'

    def test_signup_duplicate_email(self, api_client, user):
        """Cannot register with existing email."""
        url = reverse('auth:signup')
        data = {
            'email': user.email.upper(),
            'password': 'SecurePass123!',
        }
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json() == {'data': None, 'error': 'User already exists'}

    def test_signup_weak_password(self, api_client):
        """Signup fails with weak password."""
        url = reverse('auth:signup')
        data = {'email': 'weak@example.com', 'password': '123'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'].startswith('password:')

    def test_signup_invalid_email(self, api_client):
        """Signup fails with malformed email."""
        url = reverse('auth:signup')
        data = {'email': 'not-an-email', 'password': 'SecurePass123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'email' in response.json()['error']


# =============================================================================
# Login Tests
# =============================================================================

@pytest.mark.django_db
class TestLogin:
    """Tests for POST /api/v1/auth/login/"""

    def test_login_success(self, api_client, user):
        """Successfully login with correct credentials."""
        url = reverse('auth:login')
        data = {'email': 'testuser@example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_200_OK
        assert 'access_token' in response.data
        assert 'refresh_token' in response.data
        assert response.data['user']['user_id'] == str(user.id)

    def test_login_wrong_password(self, api_client, user):
        """Login fails with wrong password."""
        url = reverse('auth:login')
        data = {'email': 'testuser@example.com', 'password': 'WrongPass123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()['error'] == 'Invalid credentials'

    def test_login_nonexistent_user(self, api_client):
        """Login fails for nonexistent user."""
        url = reverse('auth:login')
        data = {'email': 'nobody@example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_login_suspended_user(self, api_client, suspended_user):
        """Suspended user cannot login."""
        url = reverse('auth:login')
        data = {'email': 'suspended@example.com', 'password': 'TestPass123!'}
        response = api_client.post(url, data)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json()['error'] == 'Account is suspended'

    def test_login_updates_last_login(self, api_client, user):
        """Login updates last_login timestamp."""
        assert user.last_login is None

        url = reverse('auth:login')
        api_client.post(url, {'email': 'testuser@example.com', 'password': 'TestPass123!'})

        user.refresh_from_db()
        assert user.last_login is not None


# =============================================================================
# Token Refresh Tests
# =============================================================================

@pytest.mark.django_db
class TestRefresh:
    """Tests for POST /api/v1/auth/refresh/"""

    def test_refresh_success(self, api_client, user):
        """A refresh token yields a new access token."""
        refresh = RefreshToken.for_user(user)
        url = reverse('auth:refresh')
        response = api_client.post(url, {'refresh_token': str(refresh)})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['token_type'] == 'Bearer'
        assert response.data['access_token']

    def test_refreshed_access_token_authenticates(self, api_client, user):
        """The new access token works on protected endpoints."""
        refresh = RefreshToken.for_user(user)
        response = api_client.post(reverse('auth:refresh'), {'refresh_token': str(refresh)})

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {response.data['access_token']}")
        profile = api_client.get(reverse('auth:profile'))

        assert profile.status_code == status.HTTP_200_OK
        assert profile.data['email'] == user.email

    def test_refresh_missing_token(self, api_client):
        """Missing refresh token is a bad request."""
        response = api_client.post(reverse('auth:refresh'), {})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['error'] == 'Refresh token required'

    def test_refresh_with_access_token(self, api_client, user):
        """An access token cannot be used as a refresh token."""
        access = RefreshToken.for_user(user).access_token
        response = api_client.post(reverse('auth:refresh'), {'refresh_token': str(access)})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()['error'] == 'Invalid token type'

    def test_refresh_garbage_token(self, api_client):
        """Malformed token is rejected."""
        response = api_client.post(reverse('auth:refresh'), {'refresh_token': 'not-a-jwt'})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_refresh_token_cannot_authenticate(self, api_client, user):
        """A refresh token is not accepted as a bearer credential."""
        refresh = RefreshToken.for_user(user)
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh}')
        response = api_client.get(reverse('auth:profile'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()['data'] is None


# =============================================================================
# Profile Tests
# =============================================================================

@pytest.mark.django_db
class TestProfile:
    """Tests for /api/v1/auth/profile/"""

    def test_get_profile(self, authenticated_client, user):
        """Get current user profile."""
        response = authenticated_client.get(reverse('auth:profile'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == user.email
        assert response.data['first_name'] == 'Test'
        assert response.data['total_reviews'] == 0
        assert 'avg_rating' in response.data

    def test_get_profile_unauthenticated(self, api_client):
        """Unauthenticated request is rejected."""
        response = api_client.get(reverse('auth:profile'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_profile_patch(self, authenticated_client, user):
        """Update first name, leave last name alone."""
        response = authenticated_client.patch(reverse('auth:profile'), {'first_name': 'Renamed'})

        assert response.status_code == status.HTTP_200_OK
        user.refresh_from_db()
        assert user.first_name == 'Renamed'
        assert user.last_name == 'User'

    def test_update_profile_post(self, authenticated_client, user):
        """POST is accepted as an update too."""
        response = authenticated_client.post(reverse('auth:profile'), {'last_name': 'Changed'})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['last_name'] == 'Changed'

    def test_cannot_update_email(self, authenticated_client, user):
        """Email is not writable through the profile."""
        authenticated_client.patch(reverse('auth:profile'), {'email': 'hacked@example.com'})

        user.refresh_from_db()
        assert user.email == 'testuser@example.com'

    def test_suspended_user_token_rejected(self, api_client, suspended_user):
        """Tokens of suspended users stop working."""
        refresh = RefreshToken.for_user(suspended_user)
        api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
        response = api_client.get(reverse('auth:profile'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Public Profile & Ping Tests
# =============================================================================

@pytest.mark.django_db
class TestUsers:
    """Tests for /api/v1/user/ endpoints."""

    def test_get_user_by_id(self, authenticated_client, other_user):
        url = reverse('users:user-detail', kwargs={'pk': other_user.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['user_id'] == str(other_user.id)
        assert 'email' not in response.data

    def test_get_user_by_id_not_found(self, authenticated_client):
        url = reverse('users:user-detail', kwargs={'pk': '00000000-0000-0000-0000-000000000000'})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_ping(self, api_client):
        response = api_client.get(reverse('users:ping'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {'data': {'module': 'user', 'status': 'pong'}, 'error': None}
