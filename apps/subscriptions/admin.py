from django.contrib import admin
from .models import Subscription, SubscriptionPlan, SubscriptionUsage


@admin.register(SubscriptionPlan)
class SubscriptionPlanAdmin(admin.ModelAdmin):
    list_display = ['name', 'price_cents', 'currency', 'billing_cycle', 'is_active']
    list_filter = ['billing_cycle', 'is_active']
    search_fields = ['name']


class SubscriptionUsageInline(admin.TabularInline):
    model = SubscriptionUsage
    extra = 0
    readonly_fields = ['usage_type', 'usage_count', 'usage_limit', 'period_start', 'period_end']


@admin.register(Subscription)
class SubscriptionAdmin(admin.ModelAdmin):
    """Admin interface for Subscriptions."""

    list_display = ['user', 'plan', 'status', 'current_period_end', 'cancel_at_period_end']
    list_filter = ['status', 'plan', 'cancel_at_period_end']
    search_fields = ['user__email', 'provider_subscription_id']
    raw_id_fields = ['user']
    readonly_fields = ['created_at', 'updated_at', 'canceled_at']
    inlines = [SubscriptionUsageInline]
