"""Tests for the email-based UserManager."""

import pytest

from authentication.models import User


class TestUserManager:
    def test_create_user_normalizes_email_and_hashes_password(self, db):
        user = User.objects.create_user(email="Ada@EXAMPLE.com", password="Secret123!")

        assert user.email == "Ada@example.com"
        assert user.check_password("Secret123!")
        assert user.is_staff is False

    def test_create_user_without_password_is_unusable(self, db):
        user = User.objects.create_user(email="nopass@example.com")

        assert user.has_usable_password() is False

    def test_create_user_requires_email(self, db):
        with pytest.raises(ValueError):
            User.objects.create_user(email="")

    def test_create_superuser_sets_flags(self, db):
        admin = User.objects.create_superuser(email="root@example.com", password="x")

        assert admin.is_staff is True
        assert admin.is_superuser is True

    def test_full_name_falls_back_to_email(self, db):
        user = User.objects.create_user(email="plain@example.com")

        assert user.get_full_name() == "plain@example.com"
        assert user.get_short_name() == "plain"
