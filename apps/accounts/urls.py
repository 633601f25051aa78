from django.urls import path
from apps.core.views import ping_view
from . import views

app_name = 'auth'

urlpatterns = [
    path('ping/', ping_view('auth'), name='ping'),

    # Authentication
    path('signup/', views.signup, name='signup'),
    path('login/', views.login, name='login'),
    path('refresh/', views.refresh, name='refresh'),

    # Current user
    path('profile/', views.profile, name='profile'),
]
