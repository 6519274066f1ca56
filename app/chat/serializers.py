"""
Serializers for chat API.

This module provides serializers for the chat system:
- ChatSerializer: Chat with its membership sets (read)
- AddChatSerializer: Open a direct chat with a user
- AddGroupSerializer: Create a group
- ChatUpdateSerializer: Rename a group or change its picture

Design Decisions:
    - Read and write serializers are separate for clarity
    - Direct chats have no name/picture of their own; the other
      participant's name and picture are shown instead
    - The viewing user comes from context["request"].user, or
      context["user"] outside of HTTP requests (WebSocket delivery)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rest_framework import serializers

from authentication.serializers import UserSerializer
from chat.constants import CHAT_CONFIG
from chat.models import Chat

if TYPE_CHECKING:
    from authentication.models import User


class ChatSerializer(serializers.ModelSerializer):
    """
    Full chat serializer.

    Includes every membership set so clients can render the member list,
    admin badges and the read-only state of groups.
    """

    name = serializers.SerializerMethodField(
        help_text="Group name, or the other participant's name for direct chats"
    )
    picture = serializers.SerializerMethodField(
        help_text="Group picture, or the other participant's picture for direct chats"
    )
    is_group = serializers.BooleanField(read_only=True)
    owner = UserSerializer(read_only=True, allow_null=True)
    admins = UserSerializer(many=True, read_only=True)
    all_time_members = UserSerializer(many=True, read_only=True)
    listing_members = UserSerializer(many=True, read_only=True)
    actual_group_members = UserSerializer(many=True, read_only=True)

    class Meta:
        model = Chat
        fields = [
            "id",
            "name",
            "picture",
            "is_group",
            "created_at",
            "updated_at",
            "owner",
            "admins",
            "all_time_members",
            "listing_members",
            "actual_group_members",
        ]
        read_only_fields = fields

    def _get_viewer(self) -> User | None:
        request = self.context.get("request")
        if request is not None:
            return request.user
        return self.context.get("user")

    def _get_other_member(self, obj: Chat) -> User | None:
        viewer = self._get_viewer()
        if viewer is None:
            return None
        return obj.get_other_member(viewer)

    def get_name(self, obj: Chat) -> str | None:
        if obj.is_group:
            return obj.name
        other = self._get_other_member(obj)
        return other.get_full_name() if other else None

    def get_picture(self, obj: Chat) -> str | None:
        if obj.is_group:
            return obj.picture
        other = self._get_other_member(obj)
        return (other.picture or None) if other else None


class AddChatSerializer(serializers.Serializer):
    """Input for opening a direct chat."""

    user_id = serializers.IntegerField(
        help_text="User to open a direct chat with",
    )


class AddGroupSerializer(serializers.Serializer):
    """
    Input for creating a group.

    The creator is added automatically and may be omitted from user_ids.
    """

    user_ids = serializers.ListField(
        child=serializers.IntegerField(),
        allow_empty=True,
        help_text="Initial group members",
    )
    name = serializers.CharField(
        max_length=CHAT_CONFIG.MAX_NAME_LENGTH,
        help_text="Group name",
    )
    picture = serializers.URLField(
        max_length=CHAT_CONFIG.MAX_PICTURE_URL_LENGTH,
        required=False,
        allow_blank=True,
        allow_null=True,
        help_text="Group picture URL",
    )

    def validate_name(self, value: str) -> str:
        """Reject whitespace-only names."""
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Group name cannot be empty.")
        return value


class ChatUpdateSerializer(serializers.Serializer):
    """
    Input for updating a group.

    Omitted or blank fields keep their current value.
    """

    name = serializers.CharField(
        max_length=CHAT_CONFIG.MAX_NAME_LENGTH,
        required=False,
        allow_blank=True,
        help_text="New group name",
    )
    picture = serializers.URLField(
        max_length=CHAT_CONFIG.MAX_PICTURE_URL_LENGTH,
        required=False,
        allow_blank=True,
        help_text="New group picture URL",
    )
