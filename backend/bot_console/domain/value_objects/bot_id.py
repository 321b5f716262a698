"""
BotId Value Object - UUID wrapper for bot identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class BotId:
    value: str  # bot_id, presented as UUID string

    def __post_init__(self):
        if not self.value:
            raise ValueError("Bot ID cannot be empty")
        UUID(self.value)  # raises ValueError if invalid UUID

    @classmethod
    def generate(cls) -> "BotId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
