"""
Chat system models.

This module defines the data model for the chat system supporting:
- Direct (1:1) chats between exactly two users
- Group chats with an owner and a set of admins

Models:
    Chat: A direct chat or a group, with its membership sets

Design Decisions:
    - A chat without a name is a direct chat; a named chat is a group
    - Membership is tracked in four independent sets:
        all_time_members      everyone who ever took part (append-only)
        listing_members       who currently sees the chat in their list
        actual_group_members  current participants of a group
        admins                group administrators
    - A chat is hard deleted once nobody has it listed
    - A group whose admins have all left has no owner and is read-only
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.conf import settings
from django.db import models

from chat.constants import CHAT_CONFIG
from core.models import BaseModel

if TYPE_CHECKING:
    from authentication.models import User


class Chat(BaseModel):
    """
    A direct chat or a group.

    Chat Types:
        DIRECT: name is NULL, exactly two all-time members, no owner/admins.
                Created lazily the first time one user opens a chat with
                another; only the initiator has it listed at first.

        GROUP: name is set. The creator becomes owner and admin; every
               initial member is an all-time, listing and actual member.

    Fields:
        name: Group name (NULL for direct chats)
        picture: Group picture URL (NULL if unset)
        owner: Group owner (NULL for direct chats and read-only groups)

    Relationships:
        admins: Group administrators
        all_time_members: Users who ever took part (historical access)
        listing_members: Users who currently have the chat in their list
        actual_group_members: Users currently in the group
    """

    name = models.CharField(
        max_length=CHAT_CONFIG.MAX_NAME_LENGTH,
        null=True,
        blank=True,
        help_text="Group name (null for direct chats)",
    )

    picture = models.URLField(
        max_length=CHAT_CONFIG.MAX_PICTURE_URL_LENGTH,
        null=True,
        blank=True,
        help_text="Group picture URL",
    )

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="owned_chats",
        help_text="Group owner (null for direct chats and read-only groups)",
    )

    admins = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="admin_chats",
        help_text="Group administrators",
    )

    all_time_members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="all_time_member_chats",
        help_text="Users who ever took part in this chat",
    )

    listing_members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="listing_member_chats",
        help_text="Users who currently have this chat in their list",
    )

    actual_group_members = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name="actual_group_member_chats",
        help_text="Users currently participating in this group",
    )

    class Meta:
        db_table = "chat_chat"
        ordering = ["-created_at"]
        indexes = [
            # Direct chat lookups filter on name IS NULL
            models.Index(fields=["name"], name="chat_chat_name_idx"),
        ]

    def __str__(self) -> str:
        """Return human-readable representation."""
        if self.is_direct:
            return f"Direct({self.pk})"
        return f"Group: {self.name}"

    @property
    def is_direct(self) -> bool:
        """Check if this is a direct (1:1) chat."""
        return self.name is None

    @property
    def is_group(self) -> bool:
        """Check if this is a group chat."""
        return self.name is not None

    @property
    def is_read_only(self) -> bool:
        """A group without an owner accepts no further changes."""
        return self.is_group and self.owner_id is None

    def get_other_member(self, user: User) -> User | None:
        """
        Get the other participant of a direct chat.

        Iterates all_time_members.all() so prefetched members are reused.

        Args:
            user: The participant looking at the chat

        Returns:
            The other all-time member, or None for groups
        """
        if not self.is_direct:
            return None
        for member in self.all_time_members.all():
            if member.pk != user.pk:
                return member
        return None
