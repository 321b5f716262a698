"""
Discord Session - One logged-in discord.py client behind the GatewayHandle port.

Lifecycle:
  start(token)  → HTTP login, then the gateway connection runs as a background task
  ready         → on_ready fired, handle usable
  task ends     → the platform dropped us for good; disconnect callbacks fire
  destroy()     → console-initiated close; callbacks do NOT fire
"""

import asyncio
import contextlib
import logging
import math
from typing import Optional

import aiohttp
import discord

from bot_console.adapters.discord import discord_mapper as mapper
from bot_console.domain.entities.remote import Channel, Guild, Message
from bot_console.domain.exceptions import (
    AccessDeniedError,
    AuthenticationFailedError,
    ConnectFailedError,
    EntityNotFoundError,
    NotTextChannelError,
    UpstreamError,
)
from bot_console.domain.ports.gateway import DisconnectCallback, GatewayHandle

logger = logging.getLogger(__name__)


class _ConsoleClient(discord.Client):
    """discord.Client that reports gateway events back to its session."""

    def __init__(self, session: "DiscordSession", **options):
        super().__init__(**options)
        self._session = session

    async def on_ready(self):
        logger.info(f"[Discord] Connected as {self.user}")
        self._session._ready.set()

    async def on_disconnect(self):
        # discord.py resumes on its own; only the end of the gateway task counts as lost
        logger.info(f"[Discord] Gateway connection dropped for {self.user}")

    async def on_resumed(self):
        logger.info(f"[Discord] Gateway session resumed for {self.user}")


@contextlib.contextmanager
def _translate_errors(not_found: str):
    """Map discord.py failures onto domain exceptions."""
    try:
        yield
    except discord.NotFound as e:
        raise EntityNotFoundError(not_found) from e
    except discord.Forbidden as e:
        raise AccessDeniedError(
            f"Bot lacks permission for this operation: {e.text or 'Missing Access'}"
        ) from e
    except discord.HTTPException as e:
        raise UpstreamError(
            f"Discord API error {e.status}: {e.text or 'request failed'}", status=e.status
        ) from e
    except (discord.DiscordException, aiohttp.ClientError) as e:
        raise UpstreamError(f"Discord request failed: {type(e).__name__}") from e


def _snowflake(raw: str, not_found: str) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise EntityNotFoundError(not_found) from e


class DiscordSession(GatewayHandle):
    """Live connection for a single bot token."""

    def __init__(self, intents: discord.Intents):
        self._client = _ConsoleClient(self, intents=intents)
        self._ready = asyncio.Event()
        self._task: Optional[asyncio.Task] = None
        self._destroyed = False
        self._callbacks: list[DisconnectCallback] = []
        self._pending: set[asyncio.Task] = set()

    # ==================== LIFECYCLE ====================

    async def start(self, token: str) -> None:
        """
        Log in and wait until the gateway reports ready.

        Raises:
            AuthenticationFailedError: Discord rejected the token
            ConnectFailedError: anything else went wrong before ready
        """
        try:
            await self._client.login(token)
            self._task = asyncio.create_task(
                self._client.connect(reconnect=True), name="discord-gateway"
            )
            await self._wait_until_ready()
        except discord.LoginFailure as e:
            await self.destroy()
            raise AuthenticationFailedError("Invalid token or login failed") from e
        except discord.PrivilegedIntentsRequired as e:
            await self.destroy()
            raise ConnectFailedError(
                "Privileged intents (members, message content) are not enabled for this bot"
            ) from e
        except BaseException:
            # includes cancellation from the login timeout
            await self.destroy()
            raise

        self._task.add_done_callback(self._on_gateway_closed)

    async def _wait_until_ready(self) -> None:
        ready_waiter = asyncio.ensure_future(self._ready.wait())
        try:
            await asyncio.wait(
                {ready_waiter, self._task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            ready_waiter.cancel()

        if self._ready.is_set():
            return
        error = None if self._task.cancelled() else self._task.exception()
        if isinstance(error, (discord.LoginFailure, discord.PrivilegedIntentsRequired)):
            raise error
        raise ConnectFailedError(
            f"Discord gateway closed before ready: {type(error).__name__ if error else 'closed'}"
        ) from error

    def _on_gateway_closed(self, task: asyncio.Task) -> None:
        if self._destroyed:
            return
        error = None if task.cancelled() else task.exception()
        logger.warning(
            f"[Discord] Gateway task for {self._client.user} ended: "
            f"{type(error).__name__ if error else 'closed'}"
        )
        for callback in self._callbacks:
            pending = asyncio.ensure_future(callback())
            self._pending.add(pending)
            pending.add_done_callback(self._pending.discard)

    async def destroy(self) -> None:
        if self._destroyed:
            return
        self._destroyed = True
        with contextlib.suppress(Exception):
            await self._client.close()
        if self._task and not self._task.done():
            self._task.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await self._task

    # ==================== STATE ====================

    def is_ready(self) -> bool:
        return (
            not self._destroyed
            and self._client.is_ready()
            and not self._client.is_closed()
        )

    def on_disconnect(self, callback: DisconnectCallback) -> None:
        self._callbacks.append(callback)

    @property
    def latency_ms(self) -> Optional[int]:
        latency = self._client.latency
        if latency is None or math.isnan(latency) or math.isinf(latency):
            return None
        return round(latency * 1000)

    @property
    def guild_count(self) -> int:
        return len(self._client.guilds)

    @property
    def user_tag(self) -> Optional[str]:
        return str(self._client.user) if self._client.user else None

    # ==================== REMOTE DATA ====================

    async def fetch_guilds(self) -> list[Guild]:
        """Fetch guilds from the API rather than the client cache."""
        guilds = []
        with _translate_errors("Guild list not available"):
            async for partial in self._client.fetch_guilds(limit=None):
                try:
                    full = await self._client.fetch_guild(partial.id, with_counts=True)
                    guilds.append(mapper.to_guild(full))
                except discord.HTTPException as e:
                    logger.debug(f"[Discord] Full fetch of guild {partial.id} failed: {e}")
                    guilds.append(mapper.to_partial_guild(partial))
        return guilds

    async def fetch_channels(self, guild_id: str) -> list[Channel]:
        not_found = "Guild not found or bot doesn't have access"
        snowflake = _snowflake(guild_id, not_found)
        try:
            guild = await self._client.fetch_guild(snowflake)
        except (discord.NotFound, discord.Forbidden) as e:
            raise EntityNotFoundError(not_found) from e
        with _translate_errors(not_found):
            channels = await guild.fetch_channels()
        return [mapper.to_channel(channel) for channel in channels]

    async def fetch_messages(self, channel_id: str, limit: int) -> list[Message]:
        channel = await self._fetch_text_channel(channel_id)
        with _translate_errors("Channel not found"):
            return [mapper.to_message(msg) async for msg in channel.history(limit=limit)]

    async def send_message(self, channel_id: str, content: str) -> Message:
        channel = await self._fetch_text_channel(channel_id)
        try:
            sent = await channel.send(content)
        except discord.Forbidden as e:
            raise AccessDeniedError(
                "Bot does not have permission to send messages in this channel"
            ) from e
        except discord.NotFound as e:
            raise EntityNotFoundError("Channel not found") from e
        except discord.HTTPException as e:
            raise UpstreamError(
                f"Discord API error {e.status}: {e.text or 'send failed'}", status=e.status
            ) from e
        return mapper.to_message(sent)

    async def _fetch_text_channel(self, channel_id: str) -> discord.TextChannel:
        snowflake = _snowflake(channel_id, "Channel not found")
        with _translate_errors("Channel not found"):
            channel = await self._client.fetch_channel(snowflake)
        if channel.type != discord.ChannelType.text:
            raise NotTextChannelError(channel_id)
        return channel
