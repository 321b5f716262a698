"""Discord Gateway - GatewayAdapter that opens discord.py sessions."""

import logging

import aiohttp
import discord

from bot_console.adapters.discord.discord_session import DiscordSession
from bot_console.domain.exceptions import ConnectFailedError
from bot_console.domain.ports.gateway import GatewayAdapter, GatewayHandle

logger = logging.getLogger(__name__)


def build_intents() -> discord.Intents:
    """Guilds, guild messages, message content and members, as the console needs."""
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    intents.members = True
    return intents


class DiscordGateway(GatewayAdapter):
    def __init__(self, intents: discord.Intents | None = None):
        self._intents = intents or build_intents()

    async def login(self, token: str) -> GatewayHandle:
        session = DiscordSession(self._intents)
        try:
            await session.start(token)
        except (discord.HTTPException, aiohttp.ClientError, OSError) as e:
            logger.warning(f"[Discord] Login failed: {type(e).__name__}")
            raise ConnectFailedError(f"Could not reach Discord: {type(e).__name__}") from e
        logger.info(f"[Discord] Session ready for {session.user_tag}")
        return session
