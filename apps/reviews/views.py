from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.core.pagination import LimitPagination
from .serializers import (
    ProductReviewSerializer,
    ProductReviewCreateSerializer,
    ProductReviewFilterSerializer,
    ProductReviewStatsSerializer,
    UserReviewSerializer,
    UserReviewCreateSerializer,
)
from .services import (
    create_product_review,
    create_user_review,
    get_product_reviews,
    get_product_review_stats,
)


class ReviewPagination(LimitPagination):
    results_key = 'reviews'


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('product_id', str),
        OpenApiParameter('reviewer_id', str),
        OpenApiParameter('rating', int),
        OpenApiParameter('status', str, description='active (default) or hidden'),
        OpenApiParameter('limit', int),
        OpenApiParameter('offset', int),
    ],
    responses={200: ProductReviewSerializer(many=True)},
    description="List product reviews, newest first.",
    tags=['reviews'],
)
@extend_schema(
    methods=['POST'],
    request=ProductReviewCreateSerializer,
    responses={201: ProductReviewSerializer},
    description="Review an active product. Passing your rental of it marks the review as verified.",
    tags=['reviews'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticatedOrReadOnly])
def product_reviews(request):
    if request.method == 'POST':
        serializer = ProductReviewCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        review = create_product_review(reviewer=request.user, **serializer.validated_data)
        return Response(ProductReviewSerializer(review).data, status=status.HTTP_201_CREATED)

    filter_serializer = ProductReviewFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    queryset = get_product_reviews(**filter_serializer.validated_data)
    paginator = ReviewPagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(ProductReviewSerializer(page, many=True).data)


@extend_schema(
    request=UserReviewCreateSerializer,
    responses={201: UserReviewSerializer},
    description=(
        "Review the other party of a rental. review_type is the role of the "
        "reviewed user: owners review their renter, renters review the owner."
    ),
    tags=['reviews'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def user_reviews(request):
    serializer = UserReviewCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    review = create_user_review(reviewer=request.user, **serializer.validated_data)
    return Response(UserReviewSerializer(review).data, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: ProductReviewStatsSerializer},
    description="Average rating and star distribution of a product's active reviews.",
    tags=['reviews'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def product_review_stats(request, product_id):
    stats = get_product_review_stats(product_id=product_id)
    return Response(ProductReviewStatsSerializer(stats).data)
