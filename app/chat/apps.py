"""
Chat application configuration.

This app provides chat membership management with:
- Direct (1:1) chats and named groups
- Owner/admin roles for groups
- Per-user chat lists
- chatAdded/chatUpdated change notifications
"""

from django.apps import AppConfig


class ChatConfig(AppConfig):
    """Configuration for the chat application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "chat"
    verbose_name = "Chat"
