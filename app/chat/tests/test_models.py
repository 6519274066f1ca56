"""
Tests for the Chat model's computed properties.

Test Organization:
    - Each test validates ONE specific behavior
    - Tests use descriptive names following: test_<scenario>_<expected_outcome>
"""

from datetime import timedelta

from django.utils import timezone

from authentication.tests.factories import UserFactory
from chat.models import Chat
from chat.tests.factories import DirectChatFactory, GroupChatFactory


class TestChatType:
    """Tests for is_direct / is_group."""

    def test_chat_without_name_is_direct(self, db):
        chat = DirectChatFactory()

        assert chat.is_direct is True
        assert chat.is_group is False

    def test_chat_with_name_is_group(self, db):
        chat = GroupChatFactory()

        assert chat.is_group is True
        assert chat.is_direct is False

    def test_str_describes_type(self, db):
        direct = DirectChatFactory()
        group = GroupChatFactory(name="Book Club")

        assert str(direct) == f"Direct({direct.pk})"
        assert str(group) == "Group: Book Club"


class TestChatReadOnly:
    """Tests for is_read_only."""

    def test_group_with_owner_is_writable(self, db):
        assert GroupChatFactory().is_read_only is False

    def test_group_without_owner_is_read_only(self, db):
        group = GroupChatFactory()
        group.owner = None
        group.save()

        assert group.is_read_only is True

    def test_direct_chat_is_never_read_only(self, db):
        assert DirectChatFactory().is_read_only is False


class TestGetOtherMember:
    """Tests for Chat.get_other_member()."""

    def test_returns_other_participant_of_direct_chat(self, db):
        alice, bob = UserFactory(), UserFactory()
        chat = DirectChatFactory(members=[alice, bob])

        assert chat.get_other_member(alice) == bob
        assert chat.get_other_member(bob) == alice

    def test_returns_none_for_groups(self, db):
        group = GroupChatFactory()

        assert group.get_other_member(group.owner) is None


class TestChatOrdering:
    def test_default_ordering_is_newest_first(self, db):
        first = DirectChatFactory()
        second = DirectChatFactory()
        Chat.objects.filter(pk=first.pk).update(
            created_at=timezone.now() - timedelta(hours=1)
        )

        assert list(Chat.objects.filter(pk__in=[first.pk, second.pk])) == [
            second,
            first,
        ]
