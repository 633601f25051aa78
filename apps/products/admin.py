from django.contrib import admin
from django.db.models import Count
from .models import Category, Product, ProductImage, ProductStatus, Tag


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    """Admin interface for Categories."""

    list_display = ['name', 'parent_category', 'product_count', 'created_at']
    search_fields = ['name', 'description']
    ordering = ['name']

    def product_count(self, obj):
        return obj.product_total
    product_count.short_description = 'Products'
    product_count.admin_order_field = 'product_total'

    def get_queryset(self, request):
        """Optimize query with annotation."""
        qs = super().get_queryset(request)
        return qs.annotate(product_total=Count('products'))


@admin.register(Tag)
class TagAdmin(admin.ModelAdmin):
    list_display = ['name', 'created_at']
    search_fields = ['name']


class ProductImageInline(admin.TabularInline):
    model = ProductImage
    extra = 0
    fields = ['image_url', 'position']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Admin interface for Products."""

    list_display = [
        'name',
        'owner',
        'category',
        'daily_price',
        'status',
        'avg_rating',
        'total_reviews',
        'created_at',
    ]
    list_filter = ['status', 'category', 'insurance_required', 'created_at']
    search_fields = ['name', 'description', 'owner__email']
    readonly_fields = ['avg_rating', 'total_reviews', 'created_at', 'updated_at']
    raw_id_fields = ['owner']
    filter_horizontal = ['tags']
    inlines = [ProductImageInline]

    fieldsets = (
        ('Listing', {
            'fields': ('name', 'description', 'owner', 'category', 'tags', 'status')
        }),
        ('Pricing', {
            'fields': ('daily_price', 'deposit_amount', 'insurance_required')
        }),
        ('Details', {
            'fields': ('specifications', 'address'),
            'classes': ('collapse',),
        }),
        ('Reputation', {
            'fields': ('avg_rating', 'total_reviews'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    actions = ['approve_products', 'reject_products']

    @admin.action(description='Approve selected products')
    def approve_products(self, request, queryset):
        count = queryset.update(status=ProductStatus.ACTIVE)
        self.message_user(request, f'Approved {count} product(s).')

    @admin.action(description='Reject selected products')
    def reject_products(self, request, queryset):
        count = queryset.update(status=ProductStatus.REJECTED)
        self.message_user(request, f'Rejected {count} product(s).')
