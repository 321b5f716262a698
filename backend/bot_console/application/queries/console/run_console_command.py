"""
RunConsoleCommand Query - Slash-style introspection for the operator console.

Reads the registry and the session map only. Nothing here talks to Discord
or changes state, so an offline bot still gets an answer.

Supported:
- /ping    → gateway heartbeat latency
- /status  → name, connection state, guild count, latency
- /uptime  → time since the current session came online
- /help    → this list
"""

from dataclasses import dataclass
from bot_console.application.common.interfaces import Query, QueryHandler
from bot_console.application.services.session_manager import SessionManager
from bot_console.domain.exceptions import DomainValidationError, EntityNotFoundError
from bot_console.domain.ports.repositories import BotRepository
from bot_console.domain.value_objects.bot_id import BotId

HELP_TEXT = "\n".join(
    [
        "/ping - Test bot latency",
        "/status - Show bot status",
        "/uptime - Show bot uptime",
        "/help - Show this message",
    ]
)


@dataclass(frozen=True)
class RunConsoleCommandQuery(Query[str]):
    bot_id: BotId
    command: str


class RunConsoleCommandHandler(QueryHandler[str]):
    def __init__(self, bot_repository: BotRepository, session_manager: SessionManager):
        self._bot_repository = bot_repository
        self._session_manager = session_manager

    async def execute(self, query: RunConsoleCommandQuery) -> str:
        parts = query.command.strip().split()
        if not parts:
            raise DomainValidationError("Invalid command")

        bot = await self._bot_repository.get_by_id(query.bot_id)
        if bot is None:
            raise EntityNotFoundError("Bot not found")

        session = self._session_manager.get_session(query.bot_id)
        live = session is not None and session.is_ready()
        latency = session.latency_ms if live else None
        latency_text = f"{latency}ms" if latency is not None else "n/a"

        cmd = parts[0].lower()
        if cmd == "/ping":
            if not live:
                return "Bot is not connected"
            return f"Pong! Latency: {latency_text}"
        if cmd == "/status":
            guilds = session.guild_count if live else 0
            return (
                f"Bot: {bot.name}\n"
                f"Status: {bot.state.value}\n"
                f"Guilds: {guilds}\n"
                f"Latency: {latency_text}"
            )
        if cmd == "/uptime":
            uptime = self._session_manager.uptime(query.bot_id) if live else None
            total = int(uptime.total_seconds()) if uptime else 0
            hours, minutes = total // 3600, (total % 3600) // 60
            return f"Uptime: {hours}h {minutes}m"
        if cmd == "/help":
            return HELP_TEXT
        return f"Unknown command: {cmd}. Type /help for available commands."
