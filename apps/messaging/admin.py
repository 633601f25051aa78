from django.contrib import admin
from .models import Conversation, Message


class MessageInline(admin.TabularInline):
    model = Message
    extra = 0
    fields = ['sender', 'content', 'message_type', 'is_read', 'created_at']
    readonly_fields = ['created_at']
    raw_id_fields = ['sender']


@admin.register(Conversation)
class ConversationAdmin(admin.ModelAdmin):
    list_display = ['id', 'rental', 'owner', 'renter', 'status', 'updated_at']
    list_filter = ['status']
    search_fields = ['owner__email', 'renter__email']
    raw_id_fields = ['rental', 'owner', 'renter']
    inlines = [MessageInline]
