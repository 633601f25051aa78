from django.contrib import admin
from .models import PaymentIntent, PaymentMethod, PaymentTransaction


@admin.register(PaymentMethod)
class PaymentMethodAdmin(admin.ModelAdmin):
    list_display = ['user', 'payment_type', 'provider', 'is_default', 'is_active', 'created_at']
    list_filter = ['payment_type', 'provider', 'is_active']
    search_fields = ['user__email', 'provider_payment_method_id']
    raw_id_fields = ['user']


class PaymentTransactionInline(admin.TabularInline):
    model = PaymentTransaction
    extra = 0
    readonly_fields = ['transaction_type', 'amount_cents', 'currency', 'status', 'provider_transaction_id', 'created_at']


@admin.register(PaymentIntent)
class PaymentIntentAdmin(admin.ModelAdmin):
    """Admin interface for Payment Intents."""

    list_display = ['id', 'user', 'amount_cents', 'currency', 'status', 'created_at']
    list_filter = ['status', 'currency', 'created_at']
    search_fields = ['user__email', 'provider_payment_intent_id', 'provider_charge_id']
    raw_id_fields = ['user', 'rental', 'subscription', 'payment_method']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [PaymentTransactionInline]
