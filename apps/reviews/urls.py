from django.urls import path
from apps.core.views import ping_view
from . import views

app_name = 'reviews'

urlpatterns = [
    path('ping/', ping_view('review'), name='ping'),

    path('product-reviews/', views.product_reviews, name='product-review-list'),
    path('user-reviews/', views.user_reviews, name='user-review-create'),
    path(
        'products/<uuid:product_id>/review-stats/',
        views.product_review_stats,
        name='product-review-stats'
    ),
]
