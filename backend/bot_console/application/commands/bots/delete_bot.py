"""Delete Bot Command - tears down the session before the record goes."""

from dataclasses import dataclass
from bot_console.domain.exceptions import EntityNotFoundError
from bot_console.domain.ports.repositories import BotRepository
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.application.common.interfaces import Command, CommandHandler
from bot_console.application.services.session_manager import SessionManager


@dataclass(frozen=True)
class DeleteBotCommand(Command[bool]):
    bot_id: BotId


class DeleteBotHandler(CommandHandler[bool]):
    def __init__(self, bot_repository: BotRepository, session_manager: SessionManager):
        self._bot_repository = bot_repository
        self._session_manager = session_manager

    async def execute(self, command: DeleteBotCommand) -> bool:
        bot = await self._bot_repository.get_by_id(command.bot_id)
        if not bot:
            raise EntityNotFoundError("Bot not found")

        await self._session_manager.disconnect(command.bot_id)

        deleted = await self._bot_repository.remove(command.bot_id)
        if not deleted:
            raise EntityNotFoundError("Bot not found")
        return deleted
