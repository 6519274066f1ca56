"""
User service.

Identity lookups and profile updates used by the chat app.

Related files:
    - models.py: User model
    - chat/services.py: ChatService depends on this service

Usage:
    from authentication.services import UserService

    user = UserService.get_user(user_id)
    UserService.update_user(user, name="Ada", picture="https://...")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.services import BaseService

from authentication.models import User

if TYPE_CHECKING:
    from django.db.models import QuerySet


class UserService(BaseService):
    """
    Service for user lookups and profile updates.

    Methods:
        create_query_builder: Base queryset of users visible to chat operations
        get_user: Resolve a user id to a User (or None)
        update_user: Update the current user's display name and picture
    """

    @classmethod
    def create_query_builder(cls) -> QuerySet[User]:
        """
        Base queryset for user lookups.

        Deactivated accounts are treated as non-existent.
        """
        return User.objects.filter(is_active=True)

    @classmethod
    def get_user(cls, user_id) -> User | None:
        """
        Get a user by identifier.

        Args:
            user_id: Primary key as int or numeric string

        Returns:
            User if found, None for unknown or malformed identifiers
        """
        try:
            pk = int(user_id)
        except (TypeError, ValueError):
            cls.get_logger().debug(f"Malformed user id {user_id!r}")
            return None

        return cls.create_query_builder().filter(pk=pk).first()

    @classmethod
    def update_user(
        cls,
        user: User,
        name: str | None = None,
        picture: str | None = None,
    ) -> User:
        """
        Update the user's display fields.

        Only provided, non-empty values are applied; omitted fields keep
        their current value.

        Args:
            user: User to update
            name: New display name
            picture: New avatar URL

        Returns:
            The updated User
        """
        update_fields = []

        if name:
            user.name = name
            update_fields.append("name")
        if picture:
            user.picture = picture
            update_fields.append("picture")

        if update_fields:
            user.save(update_fields=[*update_fields, "updated_at"])
            cls.get_logger().info(
                f"Updated {', '.join(update_fields)} for user {user.id}"
            )

        return user
