"""Discord Mapper - Converts discord.py objects to console domain entities."""

import discord

from bot_console.domain.entities.remote import (
    Attachment,
    Channel,
    Guild,
    Message,
    MessageAuthor,
)
from bot_console.domain.value_objects.channel_kind import ChannelKind

_CHANNEL_KINDS = {
    discord.ChannelType.text: ChannelKind.TEXT,
    discord.ChannelType.voice: ChannelKind.VOICE,
    discord.ChannelType.category: ChannelKind.CATEGORY,
    discord.ChannelType.news: ChannelKind.ANNOUNCEMENT,
    discord.ChannelType.forum: ChannelKind.FORUM,
    discord.ChannelType.stage_voice: ChannelKind.STAGE,
    discord.ChannelType.public_thread: ChannelKind.THREAD,
    discord.ChannelType.private_thread: ChannelKind.THREAD,
    discord.ChannelType.news_thread: ChannelKind.THREAD,
}


def _asset_key(asset) -> str | None:
    """Discord serves icons and avatars as assets; the console only needs the hash."""
    return asset.key if asset is not None else None


def to_guild(guild) -> Guild:
    member_count = getattr(guild, "approximate_member_count", None)
    if member_count is None:
        member_count = getattr(guild, "member_count", None)
    return Guild(
        id=str(guild.id),
        name=guild.name,
        icon=_asset_key(guild.icon),
        member_count=member_count,
    )


def to_partial_guild(guild) -> Guild:
    """Fallback when the full guild fetch fails: keep only what the listing returned."""
    return Guild(id=str(guild.id), name=guild.name)


def to_channel_kind(channel_type) -> ChannelKind:
    return _CHANNEL_KINDS.get(channel_type, ChannelKind.OTHER)


def to_channel(channel) -> Channel:
    parent_id = getattr(channel, "category_id", None)
    return Channel(
        id=str(channel.id),
        name=channel.name,
        kind=to_channel_kind(channel.type),
        position=channel.position,
        parent_id=str(parent_id) if parent_id is not None else None,
    )


def to_message(message) -> Message:
    author = message.author
    return Message(
        id=str(message.id),
        content=message.content,
        author=MessageAuthor(
            id=str(author.id),
            username=author.name,
            avatar=_asset_key(author.avatar),
            is_bot=bool(author.bot),
        ),
        timestamp=message.created_at,
        attachments=[
            Attachment(id=str(att.id), url=att.url, filename=att.filename or "file")
            for att in message.attachments
        ],
    )
