"""Discord adapter - discord.py implementation of the gateway port."""

from bot_console.adapters.discord.discord_gateway import DiscordGateway, build_intents
from bot_console.adapters.discord.discord_session import DiscordSession

__all__ = [
    "DiscordGateway",
    "DiscordSession",
    "build_intents",
]
