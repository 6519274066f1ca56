"""
WebSocket consumers for the chat application.

This module implements the subscription side of chat change notifications.

Consumers:
    ChatEventsConsumer: Streams chatAdded/chatUpdated events to a user

Authentication:
    Users are authenticated via JWT token passed as query parameter or
    subprotocol. The JWTAuthMiddleware attaches the user to self.scope["user"].

Channel Groups:
    Every connection joins the "chatAdded" and "chatUpdated" groups. The
    publisher sends one message per event; each connection decides whether
    its user should see it.

Message Types (to client):
    - chatAdded: A chat the user lists was created by someone else
    - chatUpdated: A chat the user lists was changed by someone else
    - error: Error response
"""

from __future__ import annotations

import logging

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer
from django.contrib.auth.models import AnonymousUser

from chat.constants import CHAT_EVENTS, WEBSOCKET_CONFIG
from chat.models import Chat
from chat.serializers import ChatSerializer
from chat.services import ChatService

logger = logging.getLogger(__name__)


def build_event_payload(chat_id, actor_id, user) -> dict | None:
    """
    Serialize a chat for a subscriber, or None if the event is filtered out.

    Events for chats deleted after publishing are dropped.
    """
    chat = (
        Chat.objects.prefetch_related(
            "owner",
            "admins",
            "all_time_members",
            "listing_members",
            "actual_group_members",
        )
        .filter(pk=chat_id)
        .first()
    )
    if chat is None:
        return None

    if not ChatService.filter_chat_added_or_updated(chat, actor_id, user):
        return None

    return ChatSerializer(chat, context={"user": user}).data


class ChatEventsConsumer(AsyncJsonWebsocketConsumer):
    """
    WebSocket consumer for chat change subscriptions.

    Handles:
        - Connection authentication
        - Joining/leaving the topic groups
        - Per-user filtering of chatAdded and chatUpdated events
    """

    async def connect(self):
        """
        Handle WebSocket connection.

        Anonymous users are rejected with close code 4001. Authenticated
        users join every topic group and the connection is accepted.
        """
        user = self.scope.get("user")

        if not user or isinstance(user, AnonymousUser):
            logger.warning("Rejected unauthenticated chat events subscription")
            await self.close(code=WEBSOCKET_CONFIG.CLOSE_UNAUTHENTICATED)
            return

        for topic in CHAT_EVENTS.TOPICS:
            await self.channel_layer.group_add(topic, self.channel_name)

        await self.accept()
        logger.info(f"User {user.id} subscribed to chat events")

    async def disconnect(self, close_code):
        """Leave the topic groups."""
        user = self.scope.get("user")
        if not user or isinstance(user, AnonymousUser):
            return

        for topic in CHAT_EVENTS.TOPICS:
            await self.channel_layer.group_discard(topic, self.channel_name)

        logger.info(f"User {user.id} unsubscribed from chat events ({close_code})")

    async def receive_json(self, content):
        """The subscription stream is server-to-client only."""
        await self.send_json(
            {
                "type": "error",
                "message": f"Unsupported message type: {content.get('type')}",
            }
        )

    # =========================================================================
    # Channel layer event handlers
    # =========================================================================

    async def chat_added(self, event):
        """Handle chat.added from the channel layer."""
        await self._deliver(CHAT_EVENTS.CHAT_ADDED, event["chat_id"], event["creator_id"])

    async def chat_updated(self, event):
        """Handle chat.updated from the channel layer."""
        await self._deliver(
            CHAT_EVENTS.CHAT_UPDATED, event["chat_id"], event["updater_id"]
        )

    async def _deliver(self, topic: str, chat_id, actor_id):
        payload = await self._build_payload(chat_id, actor_id)
        if payload is None:
            return

        await self.send_json({"type": topic, "chat": payload})

    @database_sync_to_async
    def _build_payload(self, chat_id, actor_id):
        return build_event_payload(chat_id, actor_id, self.scope["user"])
