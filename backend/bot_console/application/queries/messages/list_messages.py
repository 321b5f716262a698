"""
ListMessages Query - Recent history of a text channel.

Discord returns history newest first; the console shows it oldest first.
"""

from dataclasses import dataclass
from bot_console.application.common.interfaces import Query, QueryHandler
from bot_console.application.services.session_manager import SessionManager
from bot_console.config.settings import Config
from bot_console.domain.entities.remote import Message
from bot_console.domain.value_objects.bot_id import BotId


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[Message]]):
    bot_id: BotId
    channel_id: str
    limit: int = Config.MESSAGE_PAGE_LIMIT


class ListMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, session_manager: SessionManager):
        self._session_manager = session_manager

    async def execute(self, query: ListMessagesQuery) -> list[Message]:
        async with self._session_manager.use(query.bot_id) as session:
            messages = await session.fetch_messages(query.channel_id, query.limit)

        # reverse first so equal timestamps keep chronological order
        return sorted(
            reversed(messages[: query.limit]), key=lambda message: message.timestamp
        )
