"""Disconnect Bot Command - idempotent."""

from dataclasses import dataclass
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.application.common.interfaces import Command, CommandHandler
from bot_console.application.services.session_manager import SessionManager


@dataclass(frozen=True)
class DisconnectBotCommand(Command[None]):
    bot_id: BotId


class DisconnectBotHandler(CommandHandler[None]):
    def __init__(self, session_manager: SessionManager):
        self._session_manager = session_manager

    async def execute(self, command: DisconnectBotCommand) -> None:
        await self._session_manager.disconnect(command.bot_id)
