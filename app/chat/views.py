"""
Views for chat API.

This module provides REST API endpoints for the chat system:
- ChatViewSet: Chat list, direct chats, groups, updates and removal
- CurrentUserView: Current user's profile

URL Structure:
    /api/v1/chat/chats/          GET (chats), POST (addChat)
    /api/v1/chat/chats/groups/   POST (addGroup)
    /api/v1/chat/chats/{id}/     GET (chat), PATCH (updateChat), DELETE (removeChat)
    /api/v1/chat/me/             GET, PATCH (updateUser)

Design Decisions:
    - All operations use the service layer for business logic
    - Application errors raised by services become JSON error responses
    - Chat detail endpoints require all-time membership (IsChatMember)
"""

from __future__ import annotations

from drf_spectacular.utils import extend_schema, extend_schema_view
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.serializers import UserSerializer, UserUpdateSerializer
from chat.models import Chat
from chat.permissions import IsChatMember
from chat.serializers import (
    AddChatSerializer,
    AddGroupSerializer,
    ChatSerializer,
    ChatUpdateSerializer,
)
from chat.services import ChatService
from core.exceptions import BaseApplicationError, NotFoundError

CHAT_PREFETCH = (
    "owner",
    "admins",
    "all_time_members",
    "listing_members",
    "actual_group_members",
)


def error_response(exc: BaseApplicationError) -> Response:
    """Render an application error raised by a service."""
    return Response(exc.to_dict(), status=exc.status_code)


@extend_schema_view(
    list=extend_schema(
        operation_id="list_chats",
        summary="List chats",
        tags=["Chat"],
    ),
    create=extend_schema(
        operation_id="add_chat",
        summary="Open direct chat",
        request=AddChatSerializer,
        responses=ChatSerializer,
        tags=["Chat"],
    ),
    retrieve=extend_schema(
        operation_id="get_chat",
        summary="Get chat",
        tags=["Chat"],
    ),
    partial_update=extend_schema(
        operation_id="update_chat",
        summary="Update group",
        request=ChatUpdateSerializer,
        responses=ChatSerializer,
        tags=["Chat"],
    ),
    destroy=extend_schema(
        operation_id="remove_chat",
        summary="Remove chat",
        tags=["Chat"],
    ),
)
class ChatViewSet(viewsets.GenericViewSet):
    """
    ViewSet for chat operations.

    list:
        Chats the current user has listed, newest first.

    create:
        Open a direct chat with a user.
        Returns the existing chat if there is one, re-listing it
        for the current user when needed.

    retrieve:
        Get a chat the current user ever took part in.

    partial_update:
        Rename a group or change its picture.
        Direct chats are returned unchanged.

    destroy:
        Remove the chat from the current user's list.
        For groups the user also leaves the group.

    groups:
        Create a group with the current user as owner.
    """

    permission_classes = [IsAuthenticated]
    serializer_class = ChatSerializer
    pagination_class = None
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        """Chats listed by the current user."""
        if not self.request.user.is_authenticated:
            return Chat.objects.none()

        return ChatService.get_chats(self.request.user).prefetch_related(
            *CHAT_PREFETCH
        )

    def get_permissions(self):
        """Return permissions based on action."""
        if self.action in ("retrieve", "partial_update", "destroy"):
            return [IsAuthenticated(), IsChatMember()]
        return [IsAuthenticated()]

    def _get_chat(self, pk) -> Chat:
        """Load a chat through the service and check object permissions."""
        chat = ChatService.get_chat(pk)
        if chat is None:
            raise NotFoundError(
                f"The chat {pk} doesn't exist.",
                error_code="CHAT_NOT_FOUND",
            )
        self.check_object_permissions(self.request, chat)
        return chat

    def _render(self, chat: Chat, status_code: int = status.HTTP_200_OK) -> Response:
        chat = Chat.objects.prefetch_related(*CHAT_PREFETCH).get(pk=chat.pk)
        serializer = ChatSerializer(chat, context=self.get_serializer_context())
        return Response(serializer.data, status=status_code)

    def list(self, request):
        """List the current user's chats."""
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        """Get a single chat."""
        try:
            chat = self._get_chat(pk)
        except NotFoundError as exc:
            return error_response(exc)

        return self._render(chat)

    def create(self, request):
        """Open a direct chat."""
        serializer = AddChatSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            chat = ChatService.add_chat(
                request.user,
                serializer.validated_data["user_id"],
            )
        except BaseApplicationError as exc:
            return error_response(exc)

        return self._render(chat, status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="add_group",
        summary="Create group",
        request=AddGroupSerializer,
        responses=ChatSerializer,
        tags=["Chat"],
    )
    @action(detail=False, methods=["post"])
    def groups(self, request):
        """Create a group."""
        serializer = AddGroupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        try:
            chat = ChatService.add_group(
                request.user,
                data["user_ids"],
                name=data["name"],
                picture=data.get("picture"),
            )
        except BaseApplicationError as exc:
            return error_response(exc)

        return self._render(chat, status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        """Update a group's name and picture."""
        serializer = ChatUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            self._get_chat(pk)
        except NotFoundError as exc:
            return error_response(exc)

        chat = ChatService.update_chat(
            request.user,
            pk,
            name=serializer.validated_data.get("name"),
            picture=serializer.validated_data.get("picture"),
        )
        if chat is None:
            return error_response(
                NotFoundError(
                    f"The chat {pk} doesn't exist.",
                    error_code="CHAT_NOT_FOUND",
                )
            )

        return self._render(chat)

    def destroy(self, request, pk=None):
        """Remove a chat from the current user's list."""
        try:
            self._get_chat(pk)
            chat_id = ChatService.remove_chat(request.user, pk)
        except BaseApplicationError as exc:
            return error_response(exc)

        return Response({"id": chat_id})


class CurrentUserView(APIView):
    """
    Current user's profile.

    GET:
        Return the current user.

    PATCH:
        Update name and/or picture. Users who have a direct chat with the
        current user listed are notified through chatUpdated events.
    """

    permission_classes = [IsAuthenticated]

    @extend_schema(
        operation_id="get_current_user",
        summary="Get current user",
        responses=UserSerializer,
        tags=["Chat - Users"],
    )
    def get(self, request):
        return Response(UserSerializer(request.user).data)

    @extend_schema(
        operation_id="update_user",
        summary="Update current user",
        request=UserUpdateSerializer,
        responses=UserSerializer,
        tags=["Chat - Users"],
    )
    def patch(self, request):
        serializer = UserUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = ChatService.update_user(
            request.user,
            name=serializer.validated_data.get("name"),
            picture=serializer.validated_data.get("picture"),
        )

        return Response(UserSerializer(user).data)
