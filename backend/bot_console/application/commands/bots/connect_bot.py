"""Connect Bot Command."""

from dataclasses import dataclass
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.application.common.interfaces import Command, CommandHandler
from bot_console.application.services.session_manager import SessionManager


@dataclass(frozen=True)
class ConnectBotResult:
    already_connected: bool


@dataclass(frozen=True)
class ConnectBotCommand(Command[ConnectBotResult]):
    bot_id: BotId


class ConnectBotHandler(CommandHandler[ConnectBotResult]):
    def __init__(self, session_manager: SessionManager):
        self._session_manager = session_manager

    async def execute(self, command: ConnectBotCommand) -> ConnectBotResult:
        connected_now = await self._session_manager.connect(command.bot_id)
        return ConnectBotResult(already_connected=not connected_now)
