"""DTOs for remote Discord data: guilds, channels, messages."""

from datetime import datetime
from typing import Optional

from bot_console.application.dto.base import CamelModel
from bot_console.domain.entities.remote import Channel, Guild, Message


class GuildDTO(CamelModel):
    id: str
    name: str
    icon: Optional[str] = None
    member_count: Optional[int] = None

    @classmethod
    def from_entity(cls, guild: Guild) -> "GuildDTO":
        return cls(
            id=guild.id,
            name=guild.name,
            icon=guild.icon,
            member_count=guild.member_count,
        )


class ChannelDTO(CamelModel):
    id: str
    name: str
    kind: str
    parent_id: Optional[str] = None
    position: int

    @classmethod
    def from_entity(cls, channel: Channel) -> "ChannelDTO":
        return cls(
            id=channel.id,
            name=channel.name,
            kind=channel.kind.value,
            parent_id=channel.parent_id,
            position=channel.position,
        )


class MessageAuthorDTO(CamelModel):
    id: str
    username: str
    avatar: Optional[str] = None
    is_bot: bool = False


class AttachmentDTO(CamelModel):
    id: str
    url: str
    filename: str


class MessageDTO(CamelModel):
    id: str
    content: str
    author: MessageAuthorDTO
    timestamp: datetime
    attachments: list[AttachmentDTO] = []

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        author = message.author
        return cls(
            id=message.id,
            content=message.content,
            author=MessageAuthorDTO(
                id=author.id,
                username=author.username,
                avatar=author.avatar,
                is_bot=author.is_bot,
            ),
            timestamp=message.timestamp,
            attachments=[
                AttachmentDTO(id=att.id, url=att.url, filename=att.filename)
                for att in message.attachments
            ],
        )
