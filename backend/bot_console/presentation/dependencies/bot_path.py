"""
Path Dependencies for FastAPI.

Turns the raw {bot_id} path segment into a BotId. Anything that isn't a
valid id can't name a registered bot, so it is reported as not found.
"""

from bot_console.domain.exceptions import EntityNotFoundError
from bot_console.domain.value_objects.bot_id import BotId


async def get_bot_id(bot_id: str) -> BotId:
    try:
        return BotId(bot_id)
    except ValueError as e:
        raise EntityNotFoundError("Bot not found") from e
