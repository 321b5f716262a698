"""Guilds API Router - servers and channels visible to a connected bot."""

from fastapi import APIRouter, Depends
from dishka.integrations.fastapi import FromDishka, inject
from bot_console.application.queries.guilds import (
    ListChannelsHandler,
    ListChannelsQuery,
    ListGuildsHandler,
    ListGuildsQuery,
)
from bot_console.application.dto import ChannelDTO, GuildDTO
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.presentation.dependencies import get_bot_id


router = APIRouter(prefix="/bots/{bot_id}/guilds", tags=["guilds"])


@router.get("", response_model=list[GuildDTO])
@inject
async def list_guilds(
    handler: FromDishka[ListGuildsHandler],
    bot_id: BotId = Depends(get_bot_id),
):
    """Guilds the bot belongs to, fetched live from Discord."""
    guilds = await handler.execute(ListGuildsQuery(bot_id=bot_id))
    return [GuildDTO.from_entity(guild) for guild in guilds]


@router.get("/{guild_id}/channels", response_model=list[ChannelDTO])
@inject
async def list_channels(
    guild_id: str,
    handler: FromDishka[ListChannelsHandler],
    bot_id: BotId = Depends(get_bot_id),
):
    """Text channels of a guild, sorted by position."""
    channels = await handler.execute(
        ListChannelsQuery(bot_id=bot_id, guild_id=guild_id)
    )
    return [ChannelDTO.from_entity(channel) for channel in channels]
