"""
Create Bot Command.

- Command: @dataclass(frozen=True) holding input data
- Handler: validates through the Bot entity factory, saves via repository
- Returns: the registered Bot (offline)
"""

from dataclasses import dataclass, field
from bot_console.domain.entities.bot import Bot
from bot_console.domain.ports.repositories import BotRepository
from bot_console.application.common.interfaces import Command, CommandHandler


@dataclass(frozen=True)
class CreateBotCommand(Command[Bot]):
    name: str
    token: str = field(repr=False)


class CreateBotHandler(CommandHandler[Bot]):
    _bot_repository: BotRepository

    def __init__(self, bot_repository: BotRepository):
        self._bot_repository = bot_repository

    async def execute(self, command: CreateBotCommand) -> Bot:
        bot = Bot.create(name=command.name, token=command.token)
        return await self._bot_repository.insert(bot)
