"""
URL configuration for chat API.

URL Structure:
    Chats:
        /chats/              GET, POST
        /chats/groups/       POST
        /chats/{id}/         GET, PATCH, DELETE

    Current user:
        /me/                 GET, PATCH

All URLs are prefixed with /api/v1/chat/ in the main URL configuration.
"""

from django.urls import include, path
from rest_framework.routers import DefaultRouter

from chat.views import ChatViewSet, CurrentUserView

router = DefaultRouter()
router.register(r"chats", ChatViewSet, basename="chat")

app_name = "chat"

urlpatterns = [
    path("", include(router.urls)),
    path("me/", CurrentUserView.as_view(), name="me"),
]
