"""Bot registry queries."""

from bot_console.application.queries.bots.list_bots import ListBotsQuery, ListBotsHandler

__all__ = [
    "ListBotsQuery",
    "ListBotsHandler",
]
