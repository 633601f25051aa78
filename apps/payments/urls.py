from django.urls import path
from apps.core.views import ping_view
from . import views

app_name = 'payments'

urlpatterns = [
    path('ping/', ping_view('payment'), name='ping'),

    path('payment-methods/', views.payment_methods, name='payment-method-list'),

    path('payment-intents/', views.payment_intents, name='payment-intent-list'),
    path(
        'payment-intents/<uuid:payment_intent_id>/',
        views.payment_intent_detail,
        name='payment-intent-detail'
    ),
    path(
        'payment-intents/<uuid:payment_intent_id>/confirm/',
        views.payment_intent_confirm,
        name='payment-intent-confirm'
    ),
]
