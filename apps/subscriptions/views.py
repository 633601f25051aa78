from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer, OpenApiParameter
from apps.core.pagination import LimitPagination
from .serializers import (
    SubscriptionPlanSerializer,
    SubscriptionSerializer,
    SubscriptionUsageSerializer,
    SubscriptionCreateSerializer,
    SubscriptionCancelSerializer,
    SubscriptionFilterSerializer,
)
from .services import (
    list_plans,
    get_plan,
    create_subscription,
    get_subscription,
    get_user_subscriptions,
    cancel_subscription,
    get_subscription_usage,
)


class PlanPagination(LimitPagination):
    results_key = 'plans'


class SubscriptionPagination(LimitPagination):
    results_key = 'subscriptions'


LIMIT_OFFSET_PARAMETERS = [
    OpenApiParameter('limit', int, description='Max 100'),
    OpenApiParameter('offset', int),
]


@extend_schema(
    parameters=LIMIT_OFFSET_PARAMETERS,
    responses={200: SubscriptionPlanSerializer(many=True)},
    description="List active subscription plans, cheapest first.",
    tags=['subscriptions'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def plan_list(request):
    paginator = PlanPagination()
    page = paginator.paginate_queryset(list_plans(), request)
    return paginator.get_paginated_response(SubscriptionPlanSerializer(page, many=True).data)


@extend_schema(
    responses={200: SubscriptionPlanSerializer},
    description="Get an active subscription plan.",
    tags=['subscriptions'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def plan_detail(request, plan_id):
    return Response(SubscriptionPlanSerializer(get_plan(plan_id=plan_id)).data)


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('status', str, description='active, canceled or past_due'),
        *LIMIT_OFFSET_PARAMETERS,
    ],
    responses={200: SubscriptionSerializer(many=True)},
    description="List the current user's subscriptions, newest first.",
    tags=['subscriptions'],
)
@extend_schema(
    methods=['POST'],
    request=SubscriptionCreateSerializer,
    responses={201: SubscriptionSerializer},
    description="Subscribe the current user to a plan.",
    tags=['subscriptions'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def subscription_list(request):
    if request.method == 'POST':
        serializer = SubscriptionCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        subscription = create_subscription(
            user=request.user,
            plan_id=serializer.validated_data['plan_id'],
        )
        return Response(
            SubscriptionSerializer(subscription).data,
            status=status.HTTP_201_CREATED
        )

    filter_serializer = SubscriptionFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    queryset = get_user_subscriptions(
        user=request.user,
        status=filter_serializer.validated_data.get('status'),
    )
    paginator = SubscriptionPagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(SubscriptionSerializer(page, many=True).data)


@extend_schema(
    responses={200: SubscriptionSerializer},
    description="Get one of the current user's subscriptions.",
    tags=['subscriptions'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def subscription_detail(request, subscription_id):
    subscription = get_subscription(user=request.user, subscription_id=subscription_id)
    return Response(SubscriptionSerializer(subscription).data)


@extend_schema(
    request=SubscriptionCancelSerializer,
    responses={200: inline_serializer(
        name='SubscriptionCancelResponse',
        fields={
            'subscription_id': serializers.UUIDField(),
            'cancel_at_period_end': serializers.BooleanField(),
            'canceled_at': serializers.DateTimeField(allow_null=True),
        },
    )},
    description="Cancel a subscription at period end (default) or immediately.",
    tags=['subscriptions'],
)
@api_view(['PUT'])
@permission_classes([IsAuthenticated])
def subscription_cancel(request, subscription_id):
    serializer = SubscriptionCancelSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    at_period_end = serializer.validated_data['cancel_at_period_end']

    subscription = cancel_subscription(
        user=request.user,
        subscription_id=subscription_id,
        cancel_at_period_end=at_period_end,
    )

    return Response({
        'subscription_id': subscription.id,
        'cancel_at_period_end': at_period_end,
        'canceled_at': None if at_period_end else subscription.canceled_at,
    })


@extend_schema(
    responses={200: SubscriptionUsageSerializer(many=True)},
    description="Usage counters of one of the current user's subscriptions.",
    tags=['subscriptions'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def subscription_usage(request, subscription_id):
    usage = get_subscription_usage(user=request.user, subscription_id=subscription_id)
    return Response(SubscriptionUsageSerializer(usage, many=True).data)
