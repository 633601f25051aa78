import logging

from django.db import DatabaseError, connection
from drf_spectacular.utils import extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class StatusResponseSerializer(serializers.Serializer):
    status = serializers.CharField()


@extend_schema(
    responses={200: StatusResponseSerializer},
    description="Liveness probe. Does not touch the database.",
    tags=['health'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def healthz(request):
    return Response({'status': 'ok'})


@extend_schema(
    responses={200: StatusResponseSerializer, 503: StatusResponseSerializer},
    description="Readiness probe. Runs a trivial query against the database.",
    tags=['health'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def readyz(request):
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            cursor.fetchone()
    except DatabaseError:
        logger.warning('Readiness check failed', exc_info=True)
        return Response(
            {'error': 'db not ready'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return Response({'status': 'ready'})


def ping_view(module):
    """Build a ``GET ping/`` view answering for one API module."""

    @extend_schema(
        operation_id=f'{module}_ping',
        responses={200: inline_serializer(
            name=f'{module.capitalize()}PingResponse',
            fields={
                'module': serializers.CharField(),
                'status': serializers.CharField(),
            },
        )},
        tags=[module],
    )
    @api_view(['GET'])
    @permission_classes([AllowAny])
    def ping(request):
        return Response({'module': module, 'status': 'pong'})

    return ping
