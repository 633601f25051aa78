from django.urls import path, include
from rest_framework.routers import DefaultRouter
from apps.core.views import ping_view
from . import views

app_name = 'products'

router = DefaultRouter()
router.register(r'products', views.ProductViewSet, basename='product')

urlpatterns = [
    path('ping/', ping_view('product'), name='ping'),

    # GET  /api/v1/product/categories/ - List categories
    # POST /api/v1/product/categories/ - Create category (staff)
    path('categories/', views.CategoryListCreateView.as_view(), name='category-list'),

    # GET    /api/v1/product/products/       - List active products
    # POST   /api/v1/product/products/       - Create product
    # GET    /api/v1/product/products/{id}/  - Get product
    # PUT    /api/v1/product/products/{id}/  - Update product (owner)
    # DELETE /api/v1/product/products/{id}/  - Soft delete (owner)
    path('', include(router.urls)),
]
