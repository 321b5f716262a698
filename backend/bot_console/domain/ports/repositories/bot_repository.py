"""
Bot Repository Port - Interface for the bot registry.
Implementation: bot_console/infrastructure/persistence/memory_bot_repository.py
"""

from abc import ABC, abstractmethod
from typing import Any, Optional
from bot_console.domain.entities.bot import Bot
from bot_console.domain.value_objects.bot_id import BotId


class BotRepository(ABC):
    @abstractmethod
    async def list_all(self) -> list[Bot]: ...

    @abstractmethod
    async def get_by_id(self, bot_id: BotId) -> Optional[Bot]: ...

    @abstractmethod
    async def insert(self, bot: Bot) -> Bot: ...

    @abstractmethod
    async def update(self, bot_id: BotId, **fields: Any) -> Optional[Bot]: ...

    @abstractmethod
    async def remove(self, bot_id: BotId) -> bool: ...
