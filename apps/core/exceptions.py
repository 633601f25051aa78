"""
Error kinds shared by all apps and the DRF exception handler.

Every app derives its domain errors from one of the kinds below, so a
service can raise e.g. ``RentalNotFoundError("Rental not found")`` and the
view layer does not need to translate it. The handler turns any error into
``{"error": "<message>"}`` which the envelope renderer then wraps.
"""
import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from .messages import error_message

logger = logging.getLogger(__name__)


class NotFoundError(APIException):
    """Requested resource does not exist or is not visible to the caller."""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found.'
    default_code = 'not_found'


class InvalidStateError(APIException):
    """Business rule violation."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid state for this operation.'
    default_code = 'invalid_state'


class ConflictError(APIException):
    """Resource already exists or clashes with an existing one."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Conflict.'
    default_code = 'conflict'


class ForbiddenError(APIException):
    """Caller is authenticated but not allowed to do this."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'You do not have permission to perform this action.'
    default_code = 'forbidden'


class UnauthorizedError(APIException):
    """Missing, invalid or wrong-kind credentials."""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Unauthorized.'
    default_code = 'unauthorized'


def envelope_exception_handler(exc, context):
    """
    Convert exceptions into ``{"error": message}`` responses.

    Known errors (APIException, Http404, PermissionDenied) go through DRF's
    default handler first. Anything else is logged with its traceback and
    reported as a generic 500, never leaking the cause to the client.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            'Unhandled error in %s',
            view.__class__.__name__ if view is not None else 'unknown view',
            exc_info=exc,
        )
        set_rollback()
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response.data = {'error': error_message(response.data)}
    return response
