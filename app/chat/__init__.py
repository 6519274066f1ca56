"""
Chat app for chat and group membership.

This app handles:
- Chat lists (which chats a user currently sees)
- Direct chats, created lazily between two users
- Groups with owner and admin roles
- Leaving chats, with deletion and ownership succession
- chatAdded/chatUpdated notifications over WebSocket

Related apps:
    - authentication: User model and UserService

WebSocket Support:
    Uses Django Channels for subscriptions.
    See consumers.py for the WebSocket handler.
    See routing.py for WebSocket URL patterns.

Usage:
    from chat.services import ChatService

    # Open a direct chat
    chat = ChatService.add_chat(user, other_user.id)

    # Create a group
    group = ChatService.add_group(user, [u2.id, u3.id], name="Team")
"""
