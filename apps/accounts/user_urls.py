from django.urls import path
from apps.core.views import ping_view
from . import views

app_name = 'users'

urlpatterns = [
    path('ping/', ping_view('user'), name='ping'),
    path('users/<uuid:pk>/', views.UserDetailView.as_view(), name='user-detail'),
]
