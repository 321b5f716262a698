"""List Bots Query."""

from dataclasses import dataclass
from bot_console.domain.ports.repositories import BotRepository
from bot_console.application.common.interfaces import Query, QueryHandler
from bot_console.domain.entities.bot import Bot


@dataclass(frozen=True)
class ListBotsQuery(Query[list[Bot]]):
    pass


class ListBotsHandler(QueryHandler[list[Bot]]):
    def __init__(self, bot_repository: BotRepository):
        self._bot_repository = bot_repository

    async def execute(self, query: ListBotsQuery) -> list[Bot]:
        return await self._bot_repository.list_all()
