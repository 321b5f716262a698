"""
ListGuilds Query - Servers the bot is a member of.

Always fetched live from Discord; the adapter's view may change between requests.
"""

from dataclasses import dataclass
from bot_console.application.common.interfaces import Query, QueryHandler
from bot_console.application.services.session_manager import SessionManager
from bot_console.domain.entities.remote import Guild
from bot_console.domain.value_objects.bot_id import BotId


@dataclass(frozen=True)
class ListGuildsQuery(Query[list[Guild]]):
    bot_id: BotId


class ListGuildsHandler(QueryHandler[list[Guild]]):
    def __init__(self, session_manager: SessionManager):
        self._session_manager = session_manager

    async def execute(self, query: ListGuildsQuery) -> list[Guild]:
        async with self._session_manager.use(query.bot_id) as session:
            return await session.fetch_guilds()
