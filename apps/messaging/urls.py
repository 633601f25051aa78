from django.urls import path
from apps.core.views import ping_view
from . import views

app_name = 'messaging'

urlpatterns = [
    path('ping/', ping_view('messaging'), name='ping'),

    path('conversations/', views.conversation_list, name='conversation-list'),
    path(
        'conversations/<uuid:conversation_id>/',
        views.conversation_detail,
        name='conversation-detail'
    ),
    path(
        'conversations/<uuid:conversation_id>/messages/',
        views.conversation_messages,
        name='conversation-messages'
    ),
    path(
        'conversations/<uuid:conversation_id>/read/',
        views.conversation_read,
        name='conversation-read'
    ),
]
