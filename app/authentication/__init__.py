"""
Authentication application.

This app provides the user account model and the user service consumed by
the chat app for identity lookups and profile updates.

Key components:
    - User model: Custom email-based user with display name and picture
    - UserService: Lookups (create_query_builder, get_user) and update_user

Usage:
    from authentication.models import User
    from authentication.services import UserService
"""
