"""
Permission classes for chat API.

This module provides DRF permission classes for the chat system:
- IsChatMember: User is an all-time member of the chat

Design Decisions:
    - All-time membership grants historical access, so users who left a
      group can still open it
    - Listing and admin checks live in ChatService
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework import permissions

if TYPE_CHECKING:
    from rest_framework.request import Request
    from rest_framework.views import APIView

    from chat.models import Chat


class IsChatMember(permissions.BasePermission):
    """Allows access only to users who ever took part in the chat."""

    message = "You are not a member of this chat."

    def has_object_permission(self, request: Request, view: APIView, obj: Chat) -> bool:
        """Check if user is an all-time member."""
        if not request.user.is_authenticated:
            return False

        return obj.all_time_members.filter(pk=request.user.pk).exists()
