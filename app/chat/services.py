"""
Chat system service layer.

This module provides the business logic for the chat system, mediating
between the API layer and the data store.

Services:
    ChatService: Chat list, direct chat and group lifecycle, departures,
                 notification fan-out

Design Principles:
    - Services are stateless (use class methods); the acting user is
      passed explicitly
    - Missing users or chats raise core.exceptions.NotFoundError
    - All mutations run inside a single transaction
    - Change notifications are published through ChatEventPublisher

Usage:
    from chat.services import ChatService

    # Open (or re-list) a direct chat with another user
    chat = ChatService.add_chat(user, other_user.id)

    # Create a group
    group = ChatService.add_group(user, [u2.id, u3.id], name="Project Team")

    # Leave a chat
    ChatService.remove_chat(user, group.id)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from authentication.models import User
from authentication.services import UserService
from core.exceptions import NotFoundError, PermissionDeniedError, ValidationError
from core.services import BaseService

from chat.events import ChatEventPublisher
from chat.models import Chat

if TYPE_CHECKING:
    from django.db.models import QuerySet


class ChatService(BaseService):
    """
    Service for chat operations.

    Methods:
        get_chats: List chats the user has listed, newest first
        get_chat: Get a chat by identifier
        add_chat: Get or create a direct chat with another user
        add_group: Create a group
        update_chat: Rename a group or change its picture
        remove_chat: Remove a chat from the user's list, leaving groups
        filter_chat_added_or_updated: Decide whether a subscriber gets an event
        update_user: Update the user's profile and notify direct chat partners
    """

    @classmethod
    def create_query_builder(cls) -> QuerySet[Chat]:
        """Base queryset for chat lookups."""
        return Chat.objects.all()

    @classmethod
    def get_chats(cls, user: User) -> QuerySet[Chat]:
        """
        List the chats shown in the user's chat list.

        Args:
            user: Current user

        Returns:
            QuerySet of chats where user is a listing member,
            ordered by creation time descending
        """
        return (
            cls.create_query_builder()
            .filter(listing_members=user)
            .order_by("-created_at")
        )

    @classmethod
    def get_chat(cls, chat_id) -> Chat | None:
        """
        Get a chat by identifier.

        Args:
            chat_id: Primary key as int or numeric string

        Returns:
            Chat if found, None otherwise
        """
        try:
            pk = int(chat_id)
        except (TypeError, ValueError):
            return None

        return cls.create_query_builder().filter(pk=pk).first()

    @classmethod
    def add_chat(cls, user: User, user_id) -> Chat:
        """
        Get or create the direct chat between the current user and another.

        If the chat already exists it is returned; when the current user
        had removed it from their list, they become a listing member
        again. A new chat is listed only for the current user until the
        other side is written to.

        Args:
            user: Current user
            user_id: Identifier of the other user

        Returns:
            The existing or newly created direct Chat

        Raises:
            NotFoundError: USER_NOT_FOUND if the other user doesn't exist
            ValidationError: SAME_USER if user_id is the current user
        """
        recipient = UserService.get_user(user_id)
        if not recipient:
            raise NotFoundError(
                f"User {user_id} doesn't exist.",
                error_code="USER_NOT_FOUND",
                details={"user_id": user_id},
            )

        if recipient.pk == user.pk:
            raise ValidationError(
                "Cannot start a chat with yourself",
                error_code="SAME_USER",
            )

        # Separate filter() calls join all_time_members once per user
        chat = (
            cls.create_query_builder()
            .filter(name__isnull=True)
            .filter(all_time_members=user)
            .filter(all_time_members=recipient)
            .first()
        )

        if chat:
            if chat.listing_members.filter(pk=user.pk).exists():
                cls.get_logger().debug(
                    f"Found existing direct chat {chat.id} "
                    f"between users {user.id} and {recipient.id}"
                )
                return chat

            with cls.atomic():
                chat.listing_members.add(user)

            cls.get_logger().info(
                f"Re-listed direct chat {chat.id} for user {user.id}"
            )
            return chat

        with cls.atomic():
            chat = Chat.objects.create()
            chat.all_time_members.add(user, recipient)
            chat.listing_members.add(user)

        cls.get_logger().info(
            f"Created direct chat {chat.id} "
            f"between users {user.id} and {recipient.id}"
        )

        return chat

    @classmethod
    def add_group(
        cls,
        user: User,
        user_ids: list,
        name: str | None = None,
        picture: str | None = None,
    ) -> Chat:
        """
        Create a group.

        The current user becomes owner, admin and member. Every named user
        becomes an all-time, listing and actual member. A chatAdded event
        is published with the current user as creator.

        Args:
            user: Current user (creator)
            user_ids: Identifiers of the initial members
            name: Group name (required)
            picture: Optional group picture URL

        Returns:
            The new group Chat

        Raises:
            ValidationError: GROUP_NAME_REQUIRED if name is missing or blank
            NotFoundError: USER_NOT_FOUND if any user doesn't exist
        """
        name = name.strip() if name else ""
        if not name:
            raise ValidationError(
                "Group name is required",
                error_code="GROUP_NAME_REQUIRED",
            )

        members = []
        for user_id in user_ids:
            member = UserService.get_user(user_id)
            if not member:
                raise NotFoundError(
                    f"User {user_id} doesn't exist.",
                    error_code="USER_NOT_FOUND",
                    details={"user_id": user_id},
                )
            if member.pk != user.pk and member not in members:
                members.append(member)

        members.append(user)

        with cls.atomic():
            chat = Chat.objects.create(
                name=name,
                picture=picture or None,
                owner=user,
            )
            chat.admins.add(user)
            chat.all_time_members.add(*members)
            chat.listing_members.add(*members)
            chat.actual_group_members.add(*members)

            ChatEventPublisher.chat_added(chat, creator_id=user.id)

        cls.get_logger().info(
            f"Created group {chat.id} named '{name}' "
            f"with {len(members)} members by user {user.id}"
        )

        return chat

    @classmethod
    def update_chat(
        cls,
        user: User,
        chat_id,
        name: str | None = None,
        picture: str | None = None,
    ) -> Chat | None:
        """
        Update a group's name and picture.

        Direct chats have nothing to update and are returned unchanged.
        Names are stripped; missing, empty or whitespace-only fields keep
        their current value. A chatUpdated event is published with the
        current user as updater.

        Args:
            user: Current user
            chat_id: Chat identifier
            name: New group name
            picture: New group picture URL

        Returns:
            The chat, or None if it doesn't exist
        """
        chat = cls.get_chat(chat_id)
        if chat is None:
            return None
        if chat.is_direct:
            return chat

        name = name.strip() if name else ""
        chat.name = name or chat.name
        chat.picture = picture or chat.picture

        with cls.atomic():
            chat.save(update_fields=["name", "picture", "updated_at"])
            ChatEventPublisher.chat_updated(chat, updater_id=user.id)

        cls.get_logger().info(f"Updated group {chat.id} by user {user.id}")

        return chat

    @classmethod
    def remove_chat(cls, user: User, chat_id) -> int:
        """
        Remove a chat from the current user's list.

        Direct chat:
            The user stops listing the chat. Once neither user lists it,
            the chat is deleted.

        Group:
            The user stops listing the group. If nobody lists it anymore
            the group is deleted. Otherwise the user also leaves the group
            and its admins, and ownership passes to a remaining admin. With
            no admins left the owner becomes NULL and the group read-only.

        Args:
            user: Current user
            chat_id: Chat identifier

        Returns:
            The identifier of the removed chat

        Raises:
            NotFoundError: CHAT_NOT_FOUND if the chat doesn't exist
            PermissionDeniedError: NOT_LISTING_MEMBER if the user doesn't
                list the direct chat
        """
        chat = cls.get_chat(chat_id)
        if chat is None:
            raise NotFoundError(
                f"The chat {chat_id} doesn't exist.",
                error_code="CHAT_NOT_FOUND",
                details={"chat_id": chat_id},
            )

        removed_id = chat.pk

        with cls.atomic():
            if chat.is_direct:
                if not chat.listing_members.filter(pk=user.pk).exists():
                    raise PermissionDeniedError(
                        f"The user is not a listing member of the chat {chat_id}.",
                        error_code="NOT_LISTING_MEMBER",
                    )

                chat.listing_members.remove(user)
                if not chat.listing_members.exists():
                    chat.delete()
                    cls.get_logger().info(
                        f"Deleted direct chat {removed_id} (no listing members left)"
                    )
                else:
                    cls.get_logger().info(
                        f"User {user.id} removed direct chat {removed_id} from their list"
                    )

                return removed_id

            chat.listing_members.remove(user)
            if not chat.listing_members.exists():
                chat.delete()
                cls.get_logger().info(
                    f"Deleted group {removed_id} (no listing members left)"
                )
                return removed_id

            chat.actual_group_members.remove(user)
            chat.admins.remove(user)
            cls._reassign_owner(chat)

        cls.get_logger().info(f"User {user.id} left group {removed_id}")

        return removed_id

    @classmethod
    def _reassign_owner(cls, chat: Chat) -> User | None:
        """
        Internal: Keep the group owner in line with the admin set.

        The owner stays while still an admin. Otherwise the remaining admin
        with the lowest id takes over; with no admins left the owner is
        cleared and the group becomes read-only. Admins granted outside the
        API (e.g. Django admin) therefore never displace a sitting owner.

        This method is called within an existing transaction.
        """
        admins = chat.admins.order_by("pk")

        if chat.owner_id is not None and admins.filter(pk=chat.owner_id).exists():
            return chat.owner

        new_owner = admins.first()
        chat.owner = new_owner
        chat.save(update_fields=["owner", "updated_at"])

        if new_owner:
            cls.get_logger().info(
                f"Transferred ownership of group {chat.id} to admin {new_owner.id}"
            )
        else:
            cls.get_logger().info(
                f"Group {chat.id} has no admins left and is now read-only"
            )

        return new_owner

    @classmethod
    def filter_chat_added_or_updated(cls, chat: Chat, actor_id, user: User) -> bool:
        """
        Decide whether a chatAdded/chatUpdated event reaches a subscriber.

        Args:
            chat: Chat the event is about
            actor_id: Identifier of the user who created or updated it
            user: Subscriber

        Returns:
            True if the subscriber is not the actor and lists the chat
        """
        if str(actor_id) == str(user.id):
            return False

        return chat.listing_members.filter(pk=user.pk).exists()

    @classmethod
    def update_user(
        cls,
        user: User,
        name: str | None = None,
        picture: str | None = None,
    ) -> User:
        """
        Update the current user's profile and notify direct chat partners.

        A chatUpdated event is published for every direct chat the user
        ever took part in that someone else currently lists. Groups are
        unaffected.

        Args:
            user: Current user
            name: New display name
            picture: New avatar URL

        Returns:
            The updated user
        """
        with cls.atomic():
            user = UserService.update_user(user, name=name, picture=picture)

            others = User.objects.exclude(pk=user.pk)
            affected_chats = (
                cls.create_query_builder()
                .filter(name__isnull=True, all_time_members=user)
                .filter(listing_members__in=others)
                .distinct()
            )

            notified = 0
            for chat in affected_chats:
                ChatEventPublisher.chat_updated(chat, updater_id=user.id)
                notified += 1

        cls.get_logger().info(
            f"Updated profile of user {user.id}, notified {notified} direct chats"
        )

        return user
