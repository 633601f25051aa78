"""
URL configuration for the Rental Marketplace API.

All domain endpoints live under the versioned prefix ``/api/v1/``.
Probes (``/healthz``, ``/readyz``) and API docs sit outside it.
"""
from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from apps.core.views import healthz, readyz

urlpatterns = [
    # Probes
    path('healthz', healthz, name='healthz'),
    path('readyz', readyz, name='readyz'),

    # Admin
    path('admin/', admin.site.urls),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='api-schema'),
    path('api/docs/', SpectacularSwaggerView.as_view(url_name='api-schema'), name='api-docs'),

    # API v1
    path('api/v1/auth/', include('apps.accounts.urls')),
    path('api/v1/user/', include('apps.accounts.user_urls')),
    path('api/v1/product/', include('apps.products.urls')),
    path('api/v1/rental/', include('apps.rentals.urls')),
    path('api/v1/payment/', include('apps.payments.urls')),
    path('api/v1/subscription/', include('apps.subscriptions.urls')),
    path('api/v1/messaging/', include('apps.messaging.urls')),
    path('api/v1/review/', include('apps.reviews.urls')),
    path('api/v1/notification/', include('apps.notifications.urls')),
    path('api/v1/admin/', include('apps.moderation.urls')),
]


# Custom error handlers
handler404 = 'config.views.error_404'
handler500 = 'config.views.error_500'
