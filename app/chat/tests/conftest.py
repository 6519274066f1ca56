"""
Test configuration and fixtures for chat tests.

This module provides:
- User fixtures with different group roles
- Chat fixtures (direct and group)
- API client helpers for authenticated requests

Usage:
    def test_example(group_chat, owner_client):
        response = owner_client.get(f'/api/v1/chat/chats/{group_chat.id}/')
        assert response.status_code == 200
"""

from unittest.mock import patch

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from authentication.tests.factories import UserFactory
from chat.tests.factories import DirectChatFactory, GroupChatFactory


# =============================================================================
# User Fixtures
# =============================================================================


@pytest.fixture
def owner_user(db):
    """Create a user who owns the test group."""
    return UserFactory(name="Owner")


@pytest.fixture
def member_user(db):
    """Create a user who is a plain member of the test group."""
    return UserFactory(name="Member")


@pytest.fixture
def other_user(db):
    """Create another user for various tests."""
    return UserFactory(name="Other")


@pytest.fixture
def outsider_user(db):
    """Create a user who is not in any test chat."""
    return UserFactory(name="Outsider")


# =============================================================================
# Chat Fixtures
# =============================================================================


@pytest.fixture
def direct_chat(owner_user, member_user):
    """Direct chat between owner_user and member_user, listed by both."""
    return DirectChatFactory(members=[owner_user, member_user])


@pytest.fixture
def group_chat(owner_user, member_user, other_user):
    """Group owned by owner_user with member_user and other_user."""
    return GroupChatFactory(
        name="Project Team",
        owner=owner_user,
        members=[member_user, other_user],
    )


# =============================================================================
# Publisher Fixtures
# =============================================================================


@pytest.fixture
def mock_chat_added():
    """Patch ChatEventPublisher.chat_added."""
    with patch("chat.services.ChatEventPublisher.chat_added") as mock:
        yield mock


@pytest.fixture
def mock_chat_updated():
    """Patch ChatEventPublisher.chat_updated."""
    with patch("chat.services.ChatEventPublisher.chat_updated") as mock:
        yield mock


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def api_client():
    """Unauthenticated API client."""
    return APIClient()


@pytest.fixture
def authenticated_client_factory(db):
    """
    Factory to create authenticated clients for any user.

    Usage:
        def test_example(authenticated_client_factory, some_user):
            client = authenticated_client_factory(some_user)
            response = client.get('/api/v1/chat/chats/')
    """

    def _make_client(user):
        client = APIClient()
        refresh = RefreshToken.for_user(user)
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {refresh.access_token}")
        return client

    return _make_client


@pytest.fixture
def owner_client(authenticated_client_factory, owner_user):
    """API client authenticated as the group owner."""
    return authenticated_client_factory(owner_user)


@pytest.fixture
def member_client(authenticated_client_factory, member_user):
    """API client authenticated as a group member."""
    return authenticated_client_factory(member_user)


@pytest.fixture
def outsider_client(authenticated_client_factory, outsider_user):
    """API client authenticated as a user outside every test chat."""
    return authenticated_client_factory(outsider_user)
