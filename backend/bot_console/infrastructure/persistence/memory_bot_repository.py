"""
In-Memory Bot Repository Implementation.

Guidelines:
- Implements BotRepository port from domain layer
- Volatile: the registry lives as long as the process does
- Hands out copies so callers never mutate the stored entity directly
- A single asyncio.Lock serializes writers; reads are plain dict lookups
"""

import asyncio
import logging
from dataclasses import replace
from typing import Any, Optional
from bot_console.domain.entities.bot import Bot
from bot_console.domain.ports.repositories import BotRepository
from bot_console.domain.value_objects.bot_id import BotId

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = {"name", "state"}


class InMemoryBotRepository(BotRepository):
    _bots: dict[str, Bot]

    def __init__(self):
        self._bots = {}
        self._lock = asyncio.Lock()

    async def list_all(self) -> list[Bot]:
        """All bots in registration order."""
        return [replace(bot) for bot in self._bots.values()]

    async def get_by_id(self, bot_id: BotId) -> Optional[Bot]:
        bot = self._bots.get(bot_id.value)
        return replace(bot) if bot else None

    async def insert(self, bot: Bot) -> Bot:
        async with self._lock:
            if bot.id.value in self._bots:
                raise ValueError(f"Bot {bot.id.value} already registered")
            self._bots[bot.id.value] = replace(bot)
        logger.info(f"[BotRegistry] Registered bot {bot.id.value} ({bot.name})")
        return replace(bot)

    async def update(self, bot_id: BotId, **fields: Any) -> Optional[Bot]:
        """Partially update a bot. Returns None if the bot is gone."""
        unknown = set(fields) - _UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update bot fields: {sorted(unknown)}")

        async with self._lock:
            bot = self._bots.get(bot_id.value)
            if bot is None:
                return None
            updated = replace(bot, **fields)
            self._bots[bot_id.value] = updated
        return replace(updated)

    async def remove(self, bot_id: BotId) -> bool:
        async with self._lock:
            removed = self._bots.pop(bot_id.value, None)
        if removed:
            logger.info(f"[BotRegistry] Removed bot {bot_id.value} ({removed.name})")
        return removed is not None
