"""
Base service layer patterns for business logic encapsulation.

This module provides the foundation for the service layer:
- BaseService: Base class with common service utilities

Service Layer Philosophy:
    Services encapsulate business logic separate from views and models.
    Views handle HTTP concerns, models handle data, services handle logic.

Error Handling:
    Services raise core.exceptions subclasses for expected failures
    (missing records, business rule violations). Views translate them
    into HTTP responses. Unexpected failures propagate unchanged.

Usage:
    from core.exceptions import NotFoundError
    from core.services import BaseService

    class UserService(BaseService):
        @classmethod
        def rename(cls, user_id: int, name: str) -> User:
            user = User.objects.filter(id=user_id).first()
            if not user:
                raise NotFoundError(f"User {user_id} doesn't exist.")

            with cls.atomic():
                user.name = name
                user.save(update_fields=["name", "updated_at"])

            cls.get_logger().info(f"Renamed user {user.id}")
            return user

Related:
    - core.exceptions: Exception hierarchy raised by services
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from django.db import transaction

if TYPE_CHECKING:
    from collections.abc import Generator


class BaseService:
    """
    Base class for service layer classes.

    Provides common utilities for services:
    - Logging setup per service
    - Database transaction management

    Design Notes:
        - Use @staticmethod or @classmethod (no instance state)
        - Services should be stateless; the acting user is passed explicitly
        - Raise core.exceptions for expected failures
    """

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get logger for this service.

        Returns a logger named after the service class for
        easy filtering in logs.

        Returns:
            Logger instance for this service

        Example:
            class ChatService(BaseService):
                @classmethod
                def get_chats(cls, user):
                    cls.get_logger().debug(f"Listing chats for user {user.id}")
        """
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    @classmethod
    @contextmanager
    def atomic(cls) -> Generator[None, None, None]:
        """
        Execute operations in a database transaction.

        All database operations within this context manager are
        wrapped in a transaction. If any operation fails, all
        changes are rolled back.

        Example:
            with cls.atomic():
                chat = Chat.objects.create(name=name)
                chat.admins.add(user)
                # If adding the admin fails, the chat is also rolled back

        Note:
            This is a thin wrapper around Django's transaction.atomic().
            Use it to make transaction boundaries explicit in service code.
        """
        with transaction.atomic():
            yield
