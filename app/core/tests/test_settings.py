"""Tests for environment-driven settings."""

import os

from django.conf import settings


class TestSecretKey:
    def test_secret_key_is_read_from_environment(self):
        assert settings.SECRET_KEY == os.environ["SECRET_KEY"]

    def test_jwt_tokens_are_signed_with_secret_key(self):
        assert settings.SIMPLE_JWT["SIGNING_KEY"] == settings.SECRET_KEY
