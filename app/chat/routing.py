"""
WebSocket URL routing for the chat application.

URL Patterns:
    ws/chat/events/ - Subscribe to chatAdded/chatUpdated events

Authentication:
    JWT token should be passed as query parameter: ?token=<jwt_access_token>
    The JWTAuthMiddleware will validate the token and attach the user
    to the consumer's scope.
"""

from django.urls import path

from chat import consumers

websocket_urlpatterns = [
    path("ws/chat/events/", consumers.ChatEventsConsumer.as_asgi()),
]
