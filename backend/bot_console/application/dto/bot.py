"""Bot DTOs for API responses. The token is never part of a DTO."""

from datetime import datetime

from bot_console.application.dto.base import CamelModel
from bot_console.domain.entities.bot import Bot


class BotDTO(CamelModel):
    id: str
    name: str
    connection_state: str
    created_at: datetime

    @classmethod
    def from_entity(cls, bot: Bot) -> "BotDTO":
        return cls(
            id=bot.id.value,
            name=bot.name,
            connection_state=bot.state.value,
            created_at=bot.created_at,
        )
