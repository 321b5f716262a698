"""Message history queries."""

from bot_console.application.queries.messages.list_messages import (
    ListMessagesQuery,
    ListMessagesHandler,
)

__all__ = [
    "ListMessagesQuery",
    "ListMessagesHandler",
]
