import pytest
from rest_framework_simplejwt.tokens import AccessToken, RefreshToken
from apps.accounts.models import User, UserStatus
from apps.accounts.services import (
    register_user,
    authenticate_user,
    issue_tokens,
    refresh_access_token,
    get_user_by_id,
    update_profile,
    set_user_status,
    UserAlreadyExistsError,
    InvalidCredentialsError,
    SuspendedAccountError,
    InvalidTokenError,
    UserNotFoundError,
)


# =============================================================================
# Registration
# =============================================================================

@pytest.mark.django_db
class TestRegisterUser:

    def test_email_is_lowercased(self):
        user = register_user(email='Mixed.Case@Example.COM', password='SecurePass123!')

        assert user.email == 'mixed.case@example.com'
        assert user.check_password('SecurePass123!')
        assert user.status == UserStatus.ACTIVE

    def test_duplicate_email_case_insensitive(self, user):
        with pytest.raises(UserAlreadyExistsError) as exc:
            register_user(email='TESTUSER@example.com', password='SecurePass123!')

        assert str(exc.value) == 'User already exists'
        assert User.objects.count() == 1


# =============================================================================
# Authentication & tokens
# =============================================================================

@pytest.mark.django_db
class TestAuthenticateUser:

    def test_success_sets_last_login(self, user):
        authenticated = authenticate_user(email='TestUser@example.com', password='TestPass123!')

        assert authenticated == user
        assert authenticated.last_login is not None

    def test_wrong_password(self, user):
        with pytest.raises(InvalidCredentialsError):
            authenticate_user(email=user.email, password='nope')

    def test_suspended(self, suspended_user):
        with pytest.raises(SuspendedAccountError):
            authenticate_user(email=suspended_user.email, password='TestPass123!')


@pytest.mark.django_db
class TestTokens:

    def test_issue_tokens_carry_user_id(self, user):
        tokens = issue_tokens(user)

        assert AccessToken(tokens['access_token'])['sub'] == str(user.id)
        assert RefreshToken(tokens['refresh_token'])['sub'] == str(user.id)

    def test_refresh(self, user):
        access = refresh_access_token(refresh_token=str(RefreshToken.for_user(user)))

        assert AccessToken(access)['sub'] == str(user.id)

    def test_access_token_rejected(self, user):
        with pytest.raises(InvalidTokenError) as exc:
            refresh_access_token(refresh_token=str(RefreshToken.for_user(user).access_token))

        assert str(exc.value) == 'Invalid token type'

    def test_suspended_user_cannot_refresh(self, user):
        refresh = str(RefreshToken.for_user(user))
        set_user_status(user_id=user.id, status=UserStatus.SUSPENDED)

        with pytest.raises(InvalidTokenError) as exc:
            refresh_access_token(refresh_token=refresh)

        assert str(exc.value) == 'User not found or inactive'


# =============================================================================
# Profile
# =============================================================================

@pytest.mark.django_db
class TestProfile:

    def test_update_only_given_fields(self, user):
        update_profile(user=user, first_name='Changed')

        user.refresh_from_db()
        assert user.first_name == 'Changed'
        assert user.last_name == 'User'

    def test_get_unknown_user(self):
        with pytest.raises(UserNotFoundError):
            get_user_by_id(user_id='00000000-0000-0000-0000-000000000000')

    def test_set_status(self, user):
        set_user_status(user_id=user.id, status=UserStatus.SUSPENDED)

        user.refresh_from_db()
        assert user.is_active is False
