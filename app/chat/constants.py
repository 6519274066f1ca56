"""
Constants and configuration for the chat module.

This module centralizes configuration values for:
- Chat field limits
- Pub/sub topics used for change notifications
- WebSocket close codes for the subscription endpoint

Import example:
    from chat.constants import CHAT_CONFIG, CHAT_EVENTS
"""

from typing import Final


# =============================================================================
# Chat Configuration
# =============================================================================


class CHAT_CONFIG:
    """Configuration for chat records."""

    MAX_NAME_LENGTH: Final[int] = 100
    MAX_PICTURE_URL_LENGTH: Final[int] = 500


# =============================================================================
# Event Configuration
# =============================================================================


class CHAT_EVENTS:
    """
    Pub/sub topics for chat change notifications.

    Each topic is also the channel layer group subscribers join.
    Group names may only contain ASCII alphanumerics, hyphens,
    underscores and periods.
    """

    CHAT_ADDED: Final[str] = "chatAdded"
    CHAT_UPDATED: Final[str] = "chatUpdated"

    TOPICS: Final[tuple] = (CHAT_ADDED, CHAT_UPDATED)

    # Channel layer message types (dispatched to consumer.chat_added, etc.)
    MESSAGE_TYPE_ADDED: Final[str] = "chat.added"
    MESSAGE_TYPE_UPDATED: Final[str] = "chat.updated"


# =============================================================================
# WebSocket Configuration
# =============================================================================


class WEBSOCKET_CONFIG:
    """Close codes for the subscription WebSocket."""

    CLOSE_UNAUTHENTICATED: Final[int] = 4001
