"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass or Enum)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from bot_console.domain.value_objects.bot_id import BotId
from bot_console.domain.value_objects.connection_state import ConnectionState
from bot_console.domain.value_objects.channel_kind import ChannelKind
from bot_console.domain.value_objects.message_content import (
    MAX_MESSAGE_LENGTH,
    MessageContent,
)

__all__ = [
    "BotId",
    "ConnectionState",
    "ChannelKind",
    "MessageContent",
    "MAX_MESSAGE_LENGTH",
]
