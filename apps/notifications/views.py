from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAdminUser, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.core.pagination import LimitPagination
from .permissions import IsNotificationOwnerOrStaff
from .serializers import (
    NotificationSerializer,
    NotificationCreateSerializer,
    NotificationFilterSerializer,
)
from .services import notify, get_user_notifications, mark_notification_read


class NotificationPagination(LimitPagination):
    results_key = 'notifications'


@extend_schema(
    parameters=[
        OpenApiParameter('is_read', bool, description='Filter by read state'),
        OpenApiParameter('limit', int),
        OpenApiParameter('offset', int),
    ],
    responses={200: NotificationSerializer(many=True)},
    description="List a user's notifications, newest first.",
    tags=['notifications'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated, IsNotificationOwnerOrStaff])
def user_notifications(request, user_id):
    """List notifications of one user."""
    filter_serializer = NotificationFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    queryset = get_user_notifications(
        user_id=user_id,
        is_read=filter_serializer.validated_data.get('is_read'),
    )

    paginator = NotificationPagination()
    page = paginator.paginate_queryset(queryset, request)
    serializer = NotificationSerializer(page, many=True)
    return paginator.get_paginated_response(serializer.data)


@extend_schema(
    request=NotificationCreateSerializer,
    responses={201: NotificationSerializer},
    description="Create a notification for a user (staff only).",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAdminUser])
def create_notification(request):
    serializer = NotificationCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    notification = notify(**serializer.validated_data)

    return Response(
        NotificationSerializer(notification).data,
        status=status.HTTP_201_CREATED
    )


@extend_schema(
    request=None,
    responses={200: NotificationSerializer},
    description="Mark a notification as read.",
    tags=['notifications'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsNotificationOwnerOrStaff])
def mark_read(request, user_id, notification_id):
    notification = mark_notification_read(
        user_id=user_id,
        notification_id=notification_id,
    )
    return Response(NotificationSerializer(notification).data)
