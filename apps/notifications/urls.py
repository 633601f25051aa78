from django.urls import path
from apps.core.views import ping_view
from . import views

app_name = 'notifications'

urlpatterns = [
    path('ping/', ping_view('notification'), name='ping'),

    path('notifications/', views.create_notification, name='notification-create'),
    path(
        'users/<uuid:user_id>/notifications/',
        views.user_notifications,
        name='user-notifications'
    ),
    path(
        'users/<uuid:user_id>/notifications/<uuid:notification_id>/read/',
        views.mark_read,
        name='notification-read'
    ),
]
