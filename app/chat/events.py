"""
Chat change notifications.

Publishes chatAdded/chatUpdated events to the channel layer. Every
subscriber (see consumers.ChatEventsConsumer) joins the topic groups and
decides per connection whether an event is delivered.

Channel Layer Messages:
    {"type": "chat.added", "chat_id": int, "creator_id": str}
    {"type": "chat.updated", "chat_id": int, "updater_id": str}

Events are sent only after the surrounding transaction commits, so a
subscriber loading the chat always sees the committed membership.

Usage:
    from chat.events import ChatEventPublisher

    ChatEventPublisher.chat_added(chat, creator_id=user.id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.db import transaction

from chat.constants import CHAT_EVENTS

if TYPE_CHECKING:
    from chat.models import Chat

logger = logging.getLogger(__name__)


class ChatEventPublisher:
    """
    Publish/subscribe channel for chat events.

    Methods:
        publish: Send a payload to a topic once the transaction commits
        chat_added: Publish a chatAdded event
        chat_updated: Publish a chatUpdated event
    """

    @classmethod
    def publish(cls, topic: str, payload: dict) -> None:
        """
        Publish a payload to a topic.

        Outside of a transaction the payload is sent immediately.

        Args:
            topic: Topic name, also the channel layer group name
            payload: JSON-serializable message with a "type" key
        """
        transaction.on_commit(lambda: cls._send(topic, payload), robust=True)

    @classmethod
    def chat_added(cls, chat: Chat, creator_id) -> None:
        """Publish that a chat was created by creator_id."""
        cls.publish(
            CHAT_EVENTS.CHAT_ADDED,
            {
                "type": CHAT_EVENTS.MESSAGE_TYPE_ADDED,
                "chat_id": chat.pk,
                "creator_id": str(creator_id),
            },
        )

    @classmethod
    def chat_updated(cls, chat: Chat, updater_id) -> None:
        """Publish that a chat was updated by updater_id."""
        cls.publish(
            CHAT_EVENTS.CHAT_UPDATED,
            {
                "type": CHAT_EVENTS.MESSAGE_TYPE_UPDATED,
                "chat_id": chat.pk,
                "updater_id": str(updater_id),
            },
        )

    @staticmethod
    def _send(topic: str, payload: dict) -> None:
        channel_layer = get_channel_layer()
        if channel_layer is None:
            logger.warning(f"No channel layer configured, dropping {topic} event")
            return

        async_to_sync(channel_layer.group_send)(topic, payload)
        logger.debug(f"Published {topic} event for chat {payload.get('chat_id')}")
