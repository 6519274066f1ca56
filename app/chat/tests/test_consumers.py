"""
Tests for the chat events WebSocket consumer.

Covers connection rejection for anonymous users, the per-subscriber
payload built for chatAdded/chatUpdated events and end-to-end delivery
through the JWT middleware.
"""

import pytest
from asgiref.sync import async_to_sync, sync_to_async
from channels.routing import URLRouter
from channels.testing import WebsocketCommunicator
from django.contrib.auth.models import AnonymousUser
from rest_framework_simplejwt.tokens import AccessToken

from authentication.tests.factories import UserFactory
from chat.consumers import ChatEventsConsumer, build_event_payload
from chat.middleware import JWTAuthMiddleware
from chat.routing import websocket_urlpatterns
from chat.services import ChatService
from chat.tests.factories import DirectChatFactory


class TestChatEventsConsumerConnect:
    def test_anonymous_connection_is_rejected(self):
        async def connect():
            communicator = WebsocketCommunicator(
                ChatEventsConsumer.as_asgi(), "/ws/chat/events/"
            )
            communicator.scope["user"] = AnonymousUser()
            return await communicator.connect()

        connected, close_code = async_to_sync(connect)()

        assert connected is False
        assert close_code == 4001


class TestBuildEventPayload:
    """Tests for build_event_payload()."""

    def test_listing_member_receives_serialized_chat(
        self, group_chat, owner_user, member_user
    ):
        payload = build_event_payload(group_chat.id, str(owner_user.id), member_user)

        assert payload["id"] == group_chat.id
        assert payload["name"] == "Project Team"
        assert payload["is_group"] is True

    def test_actor_receives_nothing(self, group_chat, owner_user):
        assert build_event_payload(group_chat.id, owner_user.id, owner_user) is None

    def test_non_listing_user_receives_nothing(
        self, group_chat, owner_user, outsider_user
    ):
        assert (
            build_event_payload(group_chat.id, owner_user.id, outsider_user) is None
        )

    def test_deleted_chat_is_dropped(self, owner_user, member_user):
        assert build_event_payload(999999, owner_user.id, member_user) is None

    def test_direct_chat_named_after_other_participant(
        self, direct_chat, owner_user, member_user
    ):
        payload = build_event_payload(direct_chat.id, owner_user.id, member_user)

        assert payload["name"] == owner_user.name


def _subscribe(user) -> WebsocketCommunicator:
    """Communicator for the events endpoint, authenticated as user."""
    application = JWTAuthMiddleware(URLRouter(websocket_urlpatterns))
    token = AccessToken.for_user(user)
    return WebsocketCommunicator(application, f"/ws/chat/events/?token={token}")


@pytest.mark.django_db(transaction=True)
class TestChatEventsSubscription:
    """
    End-to-end delivery of chatAdded/chatUpdated to subscribers.

    Verifies:
    - Authenticated users join both topic groups on connect
    - Listing members receive the event with the serialized chat
    - The acting user receives nothing
    """

    def test_group_creation_is_delivered_to_members_only(self):
        owner = UserFactory(name="Owner")
        member = UserFactory(name="Member")

        async def scenario():
            owner_ws = _subscribe(owner)
            member_ws = _subscribe(member)
            assert (await owner_ws.connect())[0] is True
            assert (await member_ws.connect())[0] is True

            group = await sync_to_async(ChatService.add_group)(
                owner, [member.id], name="Weekend"
            )

            message = await member_ws.receive_json_from(timeout=2)
            owner_silent = await owner_ws.receive_nothing(timeout=0.5)

            await owner_ws.disconnect()
            await member_ws.disconnect()
            return group, message, owner_silent

        group, message, owner_silent = async_to_sync(scenario)()

        assert message["type"] == "chatAdded"
        assert message["chat"]["id"] == group.id
        assert message["chat"]["name"] == "Weekend"
        assert owner_silent is True

    def test_profile_update_is_delivered_to_direct_chat_partner(self):
        owner = UserFactory(name="Owner")
        member = UserFactory(name="Member")
        chat = DirectChatFactory(members=[owner, member])

        async def scenario():
            owner_ws = _subscribe(owner)
            member_ws = _subscribe(member)
            assert (await owner_ws.connect())[0] is True
            assert (await member_ws.connect())[0] is True

            await sync_to_async(ChatService.update_user)(owner, name="New Name")

            message = await member_ws.receive_json_from(timeout=2)
            owner_silent = await owner_ws.receive_nothing(timeout=0.5)

            await owner_ws.disconnect()
            await member_ws.disconnect()
            return message, owner_silent

        message, owner_silent = async_to_sync(scenario)()

        assert message["type"] == "chatUpdated"
        assert message["chat"]["id"] == chat.id
        assert message["chat"]["name"] == "New Name"
        assert owner_silent is True
