from django.urls import path
from apps.core.views import ping_view
from . import views

app_name = 'subscriptions'

urlpatterns = [
    path('ping/', ping_view('subscription'), name='ping'),

    path('plans/', views.plan_list, name='plan-list'),
    path('plans/<uuid:plan_id>/', views.plan_detail, name='plan-detail'),

    path('subscriptions/', views.subscription_list, name='subscription-list'),
    path(
        'subscriptions/<uuid:subscription_id>/',
        views.subscription_detail,
        name='subscription-detail'
    ),
    path(
        'subscriptions/<uuid:subscription_id>/cancel/',
        views.subscription_cancel,
        name='subscription-cancel'
    ),
    path(
        'subscriptions/<uuid:subscription_id>/usage/',
        views.subscription_usage,
        name='subscription-usage'
    ),
]
