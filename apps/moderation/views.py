from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .serializers import (
    ModerationResultSerializer,
    ProductModerationSerializer,
    UserModerationSerializer,
)
from .services import moderate_product, moderate_user


@extend_schema(
    request=UserModerationSerializer,
    responses={200: ModerationResultSerializer},
    description="Suspend or reactivate a user account. Staff only.",
    tags=['moderation'],
)
@api_view(['POST'])
@permission_classes([IsAdminUser])
def moderate_user_view(request):
    serializer = UserModerationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = moderate_user(moderator=request.user, **serializer.validated_data)
    return Response(ModerationResultSerializer(user).data)


@extend_schema(
    request=ProductModerationSerializer,
    responses={200: ModerationResultSerializer},
    description="Approve or reject a product listing. Staff only.",
    tags=['moderation'],
)
@api_view(['POST'])
@permission_classes([IsAdminUser])
def moderate_product_view(request):
    serializer = ProductModerationSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    product = moderate_product(moderator=request.user, **serializer.validated_data)
    return Response(ModerationResultSerializer(product).data)
