from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer, OpenApiParameter
from apps.core.pagination import LimitPagination
from .serializers import (
    ConversationSerializer,
    ConversationCreateSerializer,
    ConversationFilterSerializer,
    MessageSerializer,
    MessageCreateSerializer,
)
from .services import (
    create_conversation,
    get_user_conversations,
    get_conversation,
    send_message,
    get_conversation_messages,
    mark_messages_read,
)


class ConversationPagination(LimitPagination):
    results_key = 'conversations'


class MessagePagination(LimitPagination):
    default_limit = 50
    results_key = 'messages'


@extend_schema(
    methods=['GET'],
    parameters=[
        OpenApiParameter('status', str, description='active (default) or archived'),
        OpenApiParameter('limit', int),
        OpenApiParameter('offset', int),
    ],
    responses={200: ConversationSerializer(many=True)},
    description="List the current user's conversations, most recently active first.",
    tags=['messaging'],
)
@extend_schema(
    methods=['POST'],
    request=ConversationCreateSerializer,
    responses={201: ConversationSerializer},
    description="Start the conversation for one of your rentals.",
    tags=['messaging'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def conversation_list(request):
    if request.method == 'POST':
        serializer = ConversationCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        conversation = create_conversation(user=request.user, **serializer.validated_data)
        conversation = get_conversation(user=request.user, conversation_id=conversation.id)
        return Response(
            ConversationSerializer(conversation).data,
            status=status.HTTP_201_CREATED
        )

    filter_serializer = ConversationFilterSerializer(data=request.query_params)
    filter_serializer.is_valid(raise_exception=True)

    queryset = get_user_conversations(
        user=request.user,
        status=filter_serializer.validated_data.get('status'),
    )
    paginator = ConversationPagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(ConversationSerializer(page, many=True).data)


@extend_schema(
    responses={200: ConversationSerializer},
    tags=['messaging'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def conversation_detail(request, conversation_id):
    conversation = get_conversation(user=request.user, conversation_id=conversation_id)
    return Response(ConversationSerializer(conversation).data)


@extend_schema(
    methods=['GET'],
    parameters=[OpenApiParameter('limit', int), OpenApiParameter('offset', int)],
    responses={200: MessageSerializer(many=True)},
    description="Messages of a conversation, newest first.",
    tags=['messaging'],
)
@extend_schema(
    methods=['POST'],
    request=MessageCreateSerializer,
    responses={201: MessageSerializer},
    description="Send a message in an active conversation.",
    tags=['messaging'],
)
@api_view(['GET', 'POST'])
@permission_classes([IsAuthenticated])
def conversation_messages(request, conversation_id):
    if request.method == 'POST':
        serializer = MessageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        message = send_message(
            user=request.user,
            conversation_id=conversation_id,
            **serializer.validated_data
        )
        return Response(MessageSerializer(message).data, status=status.HTTP_201_CREATED)

    queryset = get_conversation_messages(user=request.user, conversation_id=conversation_id)
    paginator = MessagePagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(MessageSerializer(page, many=True).data)


@extend_schema(
    request=None,
    responses={200: inline_serializer(
        name='MarkReadResponse',
        fields={
            'conversation_id': serializers.UUIDField(),
            'messages_marked_read': serializers.IntegerField(),
        },
    )},
    description="Mark the other party's messages as read.",
    tags=['messaging'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated])
def conversation_read(request, conversation_id):
    marked = mark_messages_read(user=request.user, conversation_id=conversation_id)
    return Response({
        'conversation_id': conversation_id,
        'messages_marked_read': marked,
    })
