"""
Django admin configuration for chat models.

Provides admin interfaces for:
- Chat and group management
- Membership inspection
"""

from django.contrib import admin

from chat.models import Chat


@admin.register(Chat)
class ChatAdmin(admin.ModelAdmin):
    """Admin interface for Chat model."""

    list_display = [
        "id",
        "name",
        "is_group",
        "owner",
        "created_at",
    ]
    list_filter = ["created_at"]
    search_fields = ["name", "id"]
    readonly_fields = ["created_at", "updated_at"]
    raw_id_fields = ["owner"]
    filter_horizontal = [
        "admins",
        "all_time_members",
        "listing_members",
        "actual_group_members",
    ]
    ordering = ["-created_at"]

    @admin.display(boolean=True, description="Group")
    def is_group(self, obj):
        return obj.is_group
