from django.contrib import admin
from .models import Rental


@admin.register(Rental)
class RentalAdmin(admin.ModelAdmin):
    """Admin interface for Rentals."""

    list_display = ['product', 'renter', 'rental_period_start', 'rental_period_end', 'status', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['product__name', 'renter__email']
    raw_id_fields = ['product', 'renter']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'rental_period_start'
