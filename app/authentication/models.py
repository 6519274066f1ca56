"""
Authentication models.

This module defines the user account model:
- User: Custom user model with email-based authentication plus the
  display fields (name, picture) shown to other chat members

Related files:
    - managers.py: Custom user manager for email-based creation
    - services.py: UserService business logic

Reverse relations from chat.Chat:
    - all_time_member_chats: Chats the user ever took part in
    - listing_member_chats: Chats currently shown in the user's list
    - actual_group_member_chats: Groups the user currently belongs to
    - admin_chats: Groups the user administers
    - owned_chats: Groups the user owns
"""

from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.db import models

from authentication.managers import UserManager


class User(AbstractBaseUser, PermissionsMixin):
    """
    Custom User model using email as the primary identifier.

    Fields:
        email: Primary identifier, unique, used for login
        name: Display name shown in chat lists
        picture: Avatar URL shown in chat lists
        is_active: Whether the user account is active
        is_staff: Whether the user can access Django admin
        date_joined: When the user account was created
        updated_at: When the user record was last modified
    """

    email = models.EmailField(
        unique=True,
        db_index=True,
        max_length=254,
        help_text="User's email address (primary identifier)",
    )

    name = models.CharField(
        max_length=150,
        blank=True,
        default="",
        help_text="Display name shown to other chat members",
    )

    picture = models.URLField(
        max_length=500,
        blank=True,
        default="",
        help_text="Avatar URL shown to other chat members",
    )

    # Account status flags
    is_active = models.BooleanField(
        default=True,
        help_text="Whether this user account is active. Deselect instead of deleting.",
    )
    is_staff = models.BooleanField(
        default=False,
        help_text="Whether the user can access the admin site.",
    )

    # Timestamps
    date_joined = models.DateTimeField(
        auto_now_add=True,
        help_text="When the user account was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="When the user record was last modified",
    )

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = UserManager()

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering = ["-date_joined"]

    def __str__(self):
        """Return the user's email as string representation."""
        return self.email

    def get_full_name(self):
        """Return the display name, or email if no name is set."""
        return self.name or self.email

    def get_short_name(self):
        """Return the display name, or the email local part."""
        return self.name or self.email.split("@")[0]
