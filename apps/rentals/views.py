from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer, OpenApiParameter
from apps.core.pagination import PagePagination
from .serializers import (
    RentalSerializer,
    RentalCreateSerializer,
    RentalUpdateSerializer,
    RentalFilterSerializer,
    AvailabilityRequestSerializer,
    AvailabilityResponseSerializer,
)
from .services import (
    check_availability,
    create_rental,
    get_rental,
    get_user_rentals,
    update_rental,
)


class RentalPagination(PagePagination):
    results_key = 'rentals'


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('status', str),
        OpenApiParameter('page', int),
        OpenApiParameter('per_page', int, description='Max 100'),
    ],
    responses={200: RentalSerializer(many=True)},
    description="List rentals where the current user is renter or product owner.",
    tags=['rentals'],
)
@extend_schema(
    methods=['POST'],
    request=RentalCreateSerializer,
    responses={201: inline_serializer(
        name='RentalCreateResponse',
        fields={
            'rental_id': serializers.UUIDField(),
            'message': serializers.CharField(),
        },
    )},
    description="Request a rental. Fails with 409 if the dates overlap another booking.",
    tags=['rentals'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def rental_list(request):
    if request.method == 'POST':
        serializer = RentalCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        rental = create_rental(renter=request.user, **serializer.validated_data)

        return Response({
            'rental_id': rental.id,
            'message': 'Rental request created successfully',
        }, status=status.HTTP_201_CREATED)

    filter_serializer = RentalFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    queryset = get_user_rentals(
        user=request.user,
        status=filter_serializer.validated_data.get('status'),
    )
    paginator = RentalPagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(RentalSerializer(page, many=True).data)


@extend_schema(
    methods=['GET'],
    responses={200: RentalSerializer},
    description="Get a rental. Only its renter and the product owner can see it.",
    tags=['rentals'],
)
@extend_schema(
    methods=['PUT', 'PATCH'],
    request=RentalUpdateSerializer,
    responses={200: RentalSerializer},
    description="Change status (owner only) or pickup/return notes (either party).",
    tags=['rentals'],
)
@api_view(['GET', 'PUT', 'PATCH'])
@permission_classes([IsAuthenticated])
def rental_detail(request, rental_id):
    if request.method == 'GET':
        rental = get_rental(rental_id=rental_id, user=request.user)
        return Response(RentalSerializer(rental).data)

    serializer = RentalUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    update_rental(rental_id=rental_id, user=request.user, **serializer.validated_data)

    rental = get_rental(rental_id=rental_id, user=request.user)
    return Response(RentalSerializer(rental).data)


@extend_schema(
    request=AvailabilityRequestSerializer,
    responses={200: AvailabilityResponseSerializer},
    description="Check whether a product is free for a period. No login required.",
    tags=['rentals'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def availability(request):
    serializer = AvailabilityRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data

    result = check_availability(
        product_id=data['product_id'],
        start=data['start_date'],
        end=data['end_date'],
    )
    return Response(AvailabilityResponseSerializer(result).data)
