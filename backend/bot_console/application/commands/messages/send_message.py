"""
SendMessage Command - Post a message to a channel as the bot.

Content is a MessageContent value object, so length has been validated
before the handler (and the gateway) ever see the command.
"""

from dataclasses import dataclass
from bot_console.domain.entities.remote import Message
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.domain.value_objects.message_content import MessageContent
from bot_console.application.common.interfaces import Command, CommandHandler
from bot_console.application.services.session_manager import SessionManager


@dataclass(frozen=True)
class SendMessageCommand(Command[Message]):
    bot_id: BotId
    channel_id: str
    content: MessageContent


class SendMessageHandler(CommandHandler[Message]):
    def __init__(self, session_manager: SessionManager):
        self._session_manager = session_manager

    async def execute(self, command: SendMessageCommand) -> Message:
        async with self._session_manager.use(command.bot_id) as session:
            return await session.send_message(
                command.channel_id, command.content.value
            )
