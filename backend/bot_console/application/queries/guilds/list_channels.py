"""ListChannels Query - Text channels of one guild, in sidebar order."""

from dataclasses import dataclass
from bot_console.application.common.interfaces import Query, QueryHandler
from bot_console.application.services.session_manager import SessionManager
from bot_console.domain.entities.remote import Channel
from bot_console.domain.value_objects.bot_id import BotId


@dataclass(frozen=True)
class ListChannelsQuery(Query[list[Channel]]):
    bot_id: BotId
    guild_id: str


class ListChannelsHandler(QueryHandler[list[Channel]]):
    def __init__(self, session_manager: SessionManager):
        self._session_manager = session_manager

    async def execute(self, query: ListChannelsQuery) -> list[Channel]:
        async with self._session_manager.use(query.bot_id) as session:
            channels = await session.fetch_channels(query.guild_id)

        # sorted() is stable, so equal positions keep the adapter's order
        return sorted(
            (channel for channel in channels if channel.is_text),
            key=lambda channel: channel.position,
        )
