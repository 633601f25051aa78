from django.urls import path
from apps.core.views import ping_view
from . import views

app_name = 'moderation'

urlpatterns = [
    path('ping/', ping_view('admin'), name='ping'),

    path('users/moderate/', views.moderate_user_view, name='moderate-user'),
    path('products/moderate/', views.moderate_product_view, name='moderate-product'),
]
