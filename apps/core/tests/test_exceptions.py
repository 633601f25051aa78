import json

import pytest
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.test import APIRequestFactory

from apps.core.exceptions import ConflictError, NotFoundError
from apps.core.messages import error_message


# =============================================================================
# Error message flattening
# =============================================================================

class TestErrorMessage:

    def test_plain_string(self):
        assert error_message('Rental not found') == 'Rental not found'

    def test_detail_and_error_keys(self):
        assert error_message({'detail': 'Not allowed'}) == 'Not allowed'
        assert error_message({'error': 'Bad thing'}) == 'Bad thing'

    def test_field_errors(self):
        data = {'email': ['Enter a valid email address.'], 'password': ['Too short.', 'Too common.']}

        assert error_message(data) == (
            'email: Enter a valid email address.; password: Too short.; Too common.'
        )

    def test_non_field_errors_have_no_prefix(self):
        assert error_message({'non_field_errors': ['Dates overlap']}) == 'Dates overlap'

    def test_none(self):
        assert error_message(None) == 'Unknown error'


# =============================================================================
# Exception handler
# =============================================================================

@api_view(['GET'])
@permission_classes([AllowAny])
def _raise_conflict(request):
    raise ConflictError('Already booked')


@api_view(['GET'])
@permission_classes([AllowAny])
def _raise_not_found(request):
    raise NotFoundError()


@api_view(['GET'])
@permission_classes([AllowAny])
def _raise_unexpected(request):
    raise RuntimeError('database password is hunter2')


def _call(view):
    request = APIRequestFactory().get('/')
    response = view(request)
    response.render()
    return response, json.loads(response.content)


@pytest.mark.django_db
class TestEnvelopeExceptionHandler:

    def test_domain_error_message(self):
        response, body = _call(_raise_conflict)

        assert response.status_code == status.HTTP_409_CONFLICT
        assert body == {'data': None, 'error': 'Already booked'}

    def test_default_detail(self):
        response, body = _call(_raise_not_found)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert body['error'] == 'Not found.'

    def test_unexpected_error_is_hidden(self):
        response, body = _call(_raise_unexpected)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert body == {'data': None, 'error': 'Internal server error'}
