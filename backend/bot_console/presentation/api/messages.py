"""Messages API Router - read history and post as the bot."""

from fastapi import APIRouter, Depends, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from bot_console.application.commands.messages import (
    SendMessageCommand,
    SendMessageHandler,
)
from bot_console.application.queries.messages import (
    ListMessagesHandler,
    ListMessagesQuery,
)
from bot_console.application.dto import MessageDTO
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.domain.value_objects.message_content import MessageContent
from bot_console.presentation.dependencies import get_bot_id
from bot_console.config.settings import Config


class SendMessageRequest(BaseModel):
    content: str


router = APIRouter(prefix="/bots/{bot_id}/channels/{channel_id}/messages", tags=["messages"])


@router.get("", response_model=list[MessageDTO])
@inject
async def list_messages(
    channel_id: str,
    handler: FromDishka[ListMessagesHandler],
    bot_id: BotId = Depends(get_bot_id),
):
    """Most recent messages of a text channel, oldest first."""
    messages = await handler.execute(
        ListMessagesQuery(
            bot_id=bot_id, channel_id=channel_id, limit=Config.MESSAGE_PAGE_LIMIT
        )
    )
    return [MessageDTO.from_entity(message) for message in messages]


@router.post("", response_model=MessageDTO, status_code=status.HTTP_201_CREATED)
@inject
async def send_message(
    channel_id: str,
    request: SendMessageRequest,
    handler: FromDishka[SendMessageHandler],
    bot_id: BotId = Depends(get_bot_id),
):
    """
    Send a message as the bot.

    Content must be 1-2000 characters; it is checked before the bot's
    session is even looked up.
    """
    content = MessageContent(request.content)
    message = await handler.execute(
        SendMessageCommand(bot_id=bot_id, channel_id=channel_id, content=content)
    )
    return MessageDTO.from_entity(message)
