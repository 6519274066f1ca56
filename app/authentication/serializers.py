"""
Serializers for authentication models.

This module provides DRF serializers for:
- User model (read operations, nested in chat payloads)
- User profile updates (name, picture)

Related files:
    - models.py: User model
    - chat/views.py: CurrentUserView uses UserUpdateSerializer
"""

from rest_framework import serializers

from authentication.models import User


class UserSerializer(serializers.ModelSerializer):
    """
    Serializer for User model (read operations).

    Used for nesting users inside chat representations.
    """

    class Meta:
        model = User
        fields = [
            "id",
            "email",
            "name",
            "picture",
        ]
        read_only_fields = fields


class UserUpdateSerializer(serializers.Serializer):
    """
    Input for updating the current user's profile.

    Both fields are optional; blank values leave the stored value unchanged.
    """

    name = serializers.CharField(
        max_length=150,
        required=False,
        allow_blank=True,
        help_text="New display name",
    )
    picture = serializers.URLField(
        max_length=500,
        required=False,
        allow_blank=True,
        help_text="New avatar URL",
    )
