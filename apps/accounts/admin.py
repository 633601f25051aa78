from django.contrib import admin
from django.utils.html import format_html
from .models import User, UserStatus


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    """
    Admin interface for marketplace users.

    Suspension is done through the status field or the bulk actions below;
    superusers are never suspended from here.
    """

    list_display = [
        'email',
        'first_name',
        'last_name',
        'status_badge',
        'is_staff',
        'avg_rating',
        'total_reviews',
        'created_at',
        'last_login',
    ]
    list_filter = ['status', 'is_staff', 'is_superuser', 'created_at']
    search_fields = ['email', 'first_name', 'last_name']
    ordering = ['-created_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Basic Information', {
            'fields': ('email', 'first_name', 'last_name')
        }),
        ('Status & Permissions', {
            'fields': ('status', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
        }),
        ('Reputation', {
            'fields': ('avg_rating', 'total_reviews'),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )
    readonly_fields = ['avg_rating', 'total_reviews', 'created_at', 'updated_at', 'last_login']
    filter_horizontal = ['groups', 'user_permissions']

    def status_badge(self, obj):
        """Display status as colored badge."""
        color = '#6B8E5E' if obj.status == UserStatus.ACTIVE else '#B85C5C'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            color,
            obj.get_status_display(),
        )
    status_badge.short_description = 'Status'
    status_badge.admin_order_field = 'status'

    actions = ['activate_users', 'suspend_users']

    @admin.action(description='Activate selected users')
    def activate_users(self, request, queryset):
        count = queryset.update(status=UserStatus.ACTIVE)
        self.message_user(request, f'Activated {count} user(s).')

    @admin.action(description='Suspend selected users')
    def suspend_users(self, request, queryset):
        safe_queryset = queryset.filter(is_superuser=False)
        count = safe_queryset.update(status=UserStatus.SUSPENDED)
        skipped = queryset.count() - count
        msg = f'Suspended {count} user(s).'
        if skipped:
            msg += f' Skipped {skipped} superuser(s).'
        self.message_user(request, msg)
