"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- bot.py    → BotDTO (never carries the token)
- remote.py → GuildDTO, ChannelDTO, MessageDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from bot_console.application.dto.bot import BotDTO
from bot_console.application.dto.remote import (
    AttachmentDTO,
    ChannelDTO,
    GuildDTO,
    MessageAuthorDTO,
    MessageDTO,
)

__all__ = [
    "BotDTO",
    "GuildDTO",
    "ChannelDTO",
    "MessageDTO",
    "MessageAuthorDTO",
    "AttachmentDTO",
]
