"""Tests for JWTAuthMiddleware token extraction and user resolution."""

import pytest
from asgiref.sync import async_to_sync
from django.contrib.auth.models import AnonymousUser
from rest_framework_simplejwt.tokens import AccessToken

from authentication.tests.factories import UserFactory
from chat.middleware import JWTAuthMiddleware


def _middleware():
    return JWTAuthMiddleware(inner=None)


class TestTokenExtraction:
    def test_reads_token_from_query_string(self):
        scope = {"query_string": b"token=abc.def.ghi"}

        assert JWTAuthMiddleware._get_token_from_query(scope) == "abc.def.ghi"

    def test_missing_query_token(self):
        assert JWTAuthMiddleware._get_token_from_query({"query_string": b""}) is None

    def test_reads_token_from_subprotocol(self):
        scope = {"subprotocols": ["jwt", "abc.def.ghi"]}

        assert JWTAuthMiddleware._get_token_from_subprotocol(scope) == "abc.def.ghi"

    def test_ignores_other_subprotocols(self):
        scope = {"subprotocols": ["graphql-ws"]}

        assert JWTAuthMiddleware._get_token_from_subprotocol(scope) is None


@pytest.mark.django_db(transaction=True)
class TestUserFromToken:
    def test_valid_token_resolves_user(self):
        user = UserFactory()
        token = str(AccessToken.for_user(user))

        resolved = async_to_sync(_middleware()._get_user_from_token)(token)

        assert resolved == user

    def test_invalid_token_is_anonymous(self):
        resolved = async_to_sync(_middleware()._get_user_from_token)("not-a-jwt")

        assert isinstance(resolved, AnonymousUser)

    def test_inactive_user_is_anonymous(self):
        user = UserFactory(is_active=False)
        token = str(AccessToken.for_user(user))

        resolved = async_to_sync(_middleware()._get_user_from_token)(token)

        assert isinstance(resolved, AnonymousUser)
