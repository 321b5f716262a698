"""Guild and channel queries."""

from bot_console.application.queries.guilds.list_guilds import (
    ListGuildsQuery,
    ListGuildsHandler,
)
from bot_console.application.queries.guilds.list_channels import (
    ListChannelsQuery,
    ListChannelsHandler,
)

__all__ = [
    "ListGuildsQuery",
    "ListGuildsHandler",
    "ListChannelsQuery",
    "ListChannelsHandler",
]
