from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter
from apps.core.pagination import LimitPagination
from .serializers import (
    PaymentMethodSerializer,
    PaymentMethodCreateSerializer,
    PaymentIntentSerializer,
    PaymentIntentCreateSerializer,
    PaymentIntentConfirmSerializer,
    PaymentIntentFilterSerializer,
)
from .services import (
    create_payment_method,
    get_user_payment_methods,
    create_payment_intent,
    get_payment_intent,
    get_user_payment_intents,
    confirm_payment_intent,
)


class PaymentMethodPagination(LimitPagination):
    results_key = 'payment_methods'


class PaymentIntentPagination(LimitPagination):
    results_key = 'payment_intents'


@extend_schema(
    methods=['GET'],
    parameters=[OpenApiParameter('limit', int), OpenApiParameter('offset', int)],
    responses={200: PaymentMethodSerializer(many=True)},
    description="List the current user's active payment methods.",
    tags=['payments'],
)
@extend_schema(
    methods=['POST'],
    request=PaymentMethodCreateSerializer,
    responses={201: PaymentMethodSerializer},
    description="Store a payment method. A new default replaces the old one.",
    tags=['payments'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def payment_methods(request):
    if request.method == 'POST':
        serializer = PaymentMethodCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        payment_method = create_payment_method(user=request.user, **serializer.validated_data)
        return Response(
            PaymentMethodSerializer(payment_method).data,
            status=status.HTTP_201_CREATED
        )

    paginator = PaymentMethodPagination()
    page = paginator.paginate_queryset(get_user_payment_methods(user=request.user), request)
    return paginator.get_paginated_response(PaymentMethodSerializer(page, many=True).data)


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('status', str),
        OpenApiParameter('payment_type', str, description='rental or subscription'),
        OpenApiParameter('limit', int),
        OpenApiParameter('offset', int),
    ],
    responses={200: PaymentIntentSerializer(many=True)},
    description="List the current user's payment intents, newest first.",
    tags=['payments'],
)
@extend_schema(
    methods=['POST'],
    request=PaymentIntentCreateSerializer,
    responses={201: PaymentIntentSerializer},
    description="Create a pending payment intent for a rental or a subscription.",
    tags=['payments'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def payment_intents(request):
    if request.method == 'POST':
        serializer = PaymentIntentCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        intent = create_payment_intent(user=request.user, **serializer.validated_data)
        return Response(
            PaymentIntentSerializer(intent).data,
            status=status.HTTP_201_CREATED
        )

    filter_serializer = PaymentIntentFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    queryset = get_user_payment_intents(user=request.user, **filter_serializer.validated_data)
    paginator = PaymentIntentPagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(PaymentIntentSerializer(page, many=True).data)


@extend_schema(
    responses={200: PaymentIntentSerializer},
    description="Get one of the current user's payment intents.",
    tags=['payments'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def payment_intent_detail(request, payment_intent_id):
    intent = get_payment_intent(user=request.user, payment_intent_id=payment_intent_id)
    return Response(PaymentIntentSerializer(intent).data)


@extend_schema(
    request=PaymentIntentConfirmSerializer,
    responses={200: PaymentIntentSerializer},
    description="Charge a pending payment intent.",
    tags=['payments'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def payment_intent_confirm(request, payment_intent_id):
    serializer = PaymentIntentConfirmSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    intent = confirm_payment_intent(
        user=request.user,
        payment_intent_id=payment_intent_id,
        payment_method_id=serializer.validated_data.get('payment_method_id'),
    )
    return Response(PaymentIntentSerializer(intent).data)
