from django.contrib import admin
from .models import ProductReview, UserReview


@admin.register(ProductReview)
class ProductReviewAdmin(admin.ModelAdmin):
    """Admin interface for product reviews."""

    list_display = ['product', 'reviewer', 'rating', 'is_verified_rental', 'status', 'created_at']
    list_filter = ['rating', 'status', 'is_verified_rental', 'created_at']
    search_fields = ['product__name', 'reviewer__email', 'title', 'content']
    raw_id_fields = ['product', 'reviewer', 'rental']
    readonly_fields = ['id', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('product', 'reviewer')


@admin.register(UserReview)
class UserReviewAdmin(admin.ModelAdmin):
    list_display = ['reviewed_user', 'reviewer', 'review_type', 'rating', 'status', 'created_at']
    list_filter = ['review_type', 'rating', 'status']
    search_fields = ['reviewed_user__email', 'reviewer__email']
    raw_id_fields = ['reviewed_user', 'reviewer', 'rental']
    readonly_fields = ['id', 'created_at', 'updated_at']
