"""
Tests for UserService.

Covers user lookups (including malformed and inactive ids) and
profile updates that only touch provided fields.
"""

from authentication.services import UserService
from authentication.tests.factories import UserFactory


class TestUserServiceGetUser:
    """Tests for UserService.get_user()."""

    def test_returns_user_by_int_id(self, db):
        user = UserFactory()

        assert UserService.get_user(user.id) == user

    def test_returns_user_by_numeric_string(self, db):
        user = UserFactory()

        assert UserService.get_user(str(user.id)) == user

    def test_returns_none_for_unknown_id(self, db):
        assert UserService.get_user(999999) is None

    def test_returns_none_for_malformed_id(self, db):
        assert UserService.get_user("not-a-number") is None
        assert UserService.get_user(None) is None

    def test_inactive_users_are_not_found(self, db):
        user = UserFactory(is_active=False)

        assert UserService.get_user(user.id) is None


class TestUserServiceUpdateUser:
    """Tests for UserService.update_user()."""

    def test_updates_name_and_picture(self, db):
        user = UserFactory(name="Old", picture="https://example.com/old.png")

        UserService.update_user(
            user, name="New", picture="https://example.com/new.png"
        )

        user.refresh_from_db()
        assert user.name == "New"
        assert user.picture == "https://example.com/new.png"

    def test_missing_fields_keep_current_values(self, db):
        user = UserFactory(name="Kept", picture="https://example.com/kept.png")

        UserService.update_user(user, name="Renamed")

        user.refresh_from_db()
        assert user.name == "Renamed"
        assert user.picture == "https://example.com/kept.png"

    def test_empty_values_are_ignored(self, db):
        user = UserFactory(name="Kept")

        UserService.update_user(user, name="", picture="")

        user.refresh_from_db()
        assert user.name == "Kept"
