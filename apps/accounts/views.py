from rest_framework import status, generics, serializers
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from .models import User
from .serializers import (
    UserSerializer,
    ProfileSerializer,
    PublicProfileSerializer,
    SignupSerializer,
    LoginSerializer,
    RefreshSerializer,
    ProfileUpdateSerializer,
)
from .services import (
    register_user,
    authenticate_user,
    issue_tokens,
    refresh_access_token,
    update_profile,
)


# Response serializers for API documentation
class AuthResponseSerializer(serializers.Serializer):
    access_token = serializers.CharField()
    refresh_token = serializers.CharField()
    user = UserSerializer()


class AccessTokenResponseSerializer(serializers.Serializer):
    access_token = serializers.CharField()
    token_type = serializers.CharField()


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=SignupSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        409: ErrorResponseSerializer,
    },
    description="Register a new user account and receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def signup(request):
    """Register a new user account."""
    serializer = SignupSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = register_user(**serializer.validated_data)

    return Response({
        **issue_tokens(user),
        'user': UserSerializer(user).data,
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    request=LoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with email and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with email and password."""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = authenticate_user(**serializer.validated_data)

    return Response({
        **issue_tokens(user),
        'user': UserSerializer(user).data,
    })


@extend_schema(
    request=RefreshSerializer,
    responses={
        200: AccessTokenResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
    },
    description="Exchange a refresh token for a new access token.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def refresh(request):
    """Issue a new access token."""
    serializer = RefreshSerializer(data=request.data)

    if not serializer.is_valid():
        return Response({
            'error': 'Refresh token required'
        }, status=status.HTTP_400_BAD_REQUEST)

    access_token = refresh_access_token(
        refresh_token=serializer.validated_data['refresh_token']
    )

    return Response({
        'access_token': access_token,
        'token_type': 'Bearer',
    })


@extend_schema(
    methods=['GET'],
    responses={200: ProfileSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@extend_schema(
    methods=['PATCH', 'POST'],
    request=ProfileUpdateSerializer,
    responses={200: ProfileSerializer, 400: ErrorResponseSerializer},
    description="Update the current user's first and last name.",
    tags=['auth'],
)
@api_view(['GET', 'PATCH', 'POST'])
@permission_classes([IsAuthenticated])
def profile(request):
    """Get or update the current user's profile."""
    if request.method == 'GET':
        return Response(ProfileSerializer(request.user).data)

    serializer = ProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    user = update_profile(user=request.user, **serializer.validated_data)
    return Response(ProfileSerializer(user).data)


class UserDetailView(generics.RetrieveAPIView):
    """Get public profile of a user."""

    queryset = User.objects.all()
    serializer_class = PublicProfileSerializer
    permission_classes = [IsAuthenticated]

    @extend_schema(
        description="Get a user's public profile and reputation.",
        tags=['users'],
    )
    def get(self, request, *args, **kwargs):
        return super().get(request, *args, **kwargs)
