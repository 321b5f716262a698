"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Pure Python dataclasses (no ORM, no Pydantic)

Bot is owned by the console. Guild, Channel and Message are projections of
remote Discord objects and are never stored.
"""

from bot_console.domain.entities.bot import Bot
from bot_console.domain.entities.remote import (
    Attachment,
    Channel,
    Guild,
    Message,
    MessageAuthor,
)

__all__ = [
    "Bot",
    "Guild",
    "Channel",
    "Message",
    "MessageAuthor",
    "Attachment",
]
