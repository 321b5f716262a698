"""
SessionManager - Owns the live gateway session of every connected bot.

The manager is the only component that holds GatewayHandles. Everything that
talks to Discord goes through it, so the per-bot state machine stays in one place:

    offline --connect--> connecting --ready--> online
    connecting --login failure / timeout / disconnect--> offline
    online --disconnect (explicit or pushed by the adapter)--> offline

Invariants:
- At most one handle per bot id.
- state == online only while a ready handle is registered.
- Concurrent connects for one bot share a single login attempt.
- A handle is destroyed before its entry leaves the map.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone
from typing import AsyncIterator, Optional

from bot_console.config.settings import Config
from bot_console.domain.entities.bot import Bot
from bot_console.domain.exceptions import (
    AccessDeniedError,
    AuthenticationFailedError,
    ConnectFailedError,
    DomainValidationError,
    EntityNotFoundError,
    NotConnectedError,
    UpstreamError,
)
from bot_console.domain.ports.gateway import GatewayAdapter, GatewayHandle
from bot_console.domain.ports.repositories import BotRepository
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.domain.value_objects.connection_state import ConnectionState
from bot_console.observability.metrics import (
    ConnectOutcome,
    DisconnectReason,
    increment_connect_attempt,
    increment_session_disconnect,
    increment_upstream_error,
    set_active_sessions,
)

logger = logging.getLogger(__name__)

# Adapter errors that already carry a client-facing meaning
_PASSTHROUGH_ERRORS = (
    EntityNotFoundError,
    AccessDeniedError,
    DomainValidationError,
    NotConnectedError,
)


class SessionManager:
    """Maps bot ids to live gateway handles."""

    def __init__(
        self,
        bot_repository: BotRepository,
        gateway: GatewayAdapter,
        login_timeout: float = Config.DISCORD_LOGIN_TIMEOUT,
    ):
        self._bots = bot_repository
        self._gateway = gateway
        self._login_timeout = login_timeout
        self._sessions: dict[str, GatewayHandle] = {}
        self._connected_at: dict[str, datetime] = {}
        self._logins: dict[str, asyncio.Task] = {}

    # ==================== LOOKUPS ====================

    def get_session(self, bot_id: BotId) -> Optional[GatewayHandle]:
        return self._sessions.get(bot_id.value)

    def is_connecting(self, bot_id: BotId) -> bool:
        login = self._logins.get(bot_id.value)
        return login is not None and not login.done()

    def uptime(self, bot_id: BotId) -> Optional[timedelta]:
        connected_at = self._connected_at.get(bot_id.value)
        if connected_at is None:
            return None
        return datetime.now(timezone.utc) - connected_at

    @property
    def active_count(self) -> int:
        return len(self._sessions)

    async def require_session(self, bot_id: BotId) -> tuple[Bot, GatewayHandle]:
        """
        Resolve a bot and its ready session.

        Raises:
            EntityNotFoundError: unknown bot
            NotConnectedError: bot is not online
        """
        bot = await self._bots.get_by_id(bot_id)
        if bot is None:
            raise EntityNotFoundError(f"Bot {bot_id.value} not found")
        handle = self._sessions.get(bot_id.value)
        if handle is None or not bot.is_online or not handle.is_ready():
            raise NotConnectedError()
        return bot, handle

    @asynccontextmanager
    async def use(self, bot_id: BotId) -> AsyncIterator[GatewayHandle]:
        """
        Run a gateway call against the bot's live session.

        Domain errors from the adapter pass through. Anything else becomes
        UpstreamError, or NotConnectedError if the session went away while
        the call was in flight. A failed call never changes connection state.
        """
        _, handle = await self.require_session(bot_id)
        try:
            yield handle
        except _PASSTHROUGH_ERRORS:
            raise
        except Exception as e:
            if self._sessions.get(bot_id.value) is not handle or not handle.is_ready():
                raise NotConnectedError(
                    "Bot disconnected while the request was in flight"
                ) from e
            increment_upstream_error(type(e).__name__)
            if isinstance(e, UpstreamError):
                raise
            logger.warning(
                f"[Session] Gateway call for bot {bot_id.value} failed: {type(e).__name__}"
            )
            raise UpstreamError(f"Gateway request failed: {type(e).__name__}") from e

    # ==================== CONNECT ====================

    async def connect(self, bot_id: BotId) -> bool:
        """
        Bring a bot online.

        Returns:
            True if this call produced (or joined) a login, False if the bot
            already had a ready session.

        Raises:
            EntityNotFoundError: unknown bot (or deleted during login)
            AuthenticationFailedError: Discord rejected the token
            ConnectFailedError: network failure or login timeout
        """
        bot = await self._bots.get_by_id(bot_id)
        if bot is None:
            raise EntityNotFoundError(f"Bot {bot_id.value} not found")

        key = bot_id.value
        handle = self._sessions.get(key)
        if handle is not None and handle.is_ready():
            logger.info(f"[Session] Bot {key} already connected")
            return False

        login = self._logins.get(key)
        if login is None:
            login = asyncio.create_task(self._login(bot), name=f"login-{key}")
            self._logins[key] = login
            login.add_done_callback(lambda task: self._forget_login(key, task))
        else:
            logger.info(f"[Session] Joining in-flight login for bot {key}")

        try:
            await asyncio.shield(login)
        except asyncio.CancelledError:
            if login.cancelled():
                raise ConnectFailedError("Connect was cancelled by a disconnect") from None
            raise
        return True

    def _forget_login(self, key: str, task: asyncio.Task) -> None:
        if self._logins.get(key) is task:
            del self._logins[key]
        if not task.cancelled():
            task.exception()  # mark retrieved when every waiter has gone away

    async def _login(self, bot: Bot) -> None:
        key = bot.id.value
        stale = self._sessions.get(key)
        if stale is not None:
            logger.info(f"[Session] Dropping non-ready session for bot {key}")
            await self._drop_session(key, DisconnectReason.STALE)

        await self._bots.update(bot.id, state=ConnectionState.CONNECTING)
        logger.info(f"[Session] Connecting bot {key} ({bot.name})")

        try:
            handle = await asyncio.wait_for(
                self._gateway.login(bot.token), timeout=self._login_timeout
            )
        except asyncio.TimeoutError as e:
            await self._login_failed(bot, ConnectOutcome.TIMEOUT)
            raise ConnectFailedError(
                f"Login timed out after {self._login_timeout:g}s"
            ) from e
        except AuthenticationFailedError:
            await self._login_failed(bot, ConnectOutcome.AUTH_FAILED)
            raise
        except ConnectFailedError:
            await self._login_failed(bot, ConnectOutcome.FAILED)
            raise
        except asyncio.CancelledError:
            await self._login_failed(bot, ConnectOutcome.CANCELLED)
            raise
        except Exception as e:
            await self._login_failed(bot, ConnectOutcome.FAILED)
            raise ConnectFailedError(
                f"Failed to connect bot: {type(e).__name__}"
            ) from e

        try:
            if await self._bots.get_by_id(bot.id) is None:
                raise EntityNotFoundError(f"Bot {key} was deleted while connecting")
            handle.on_disconnect(lambda: self._on_remote_disconnect(bot.id, handle))
            self._sessions[key] = handle
            self._connected_at[key] = datetime.now(timezone.utc)
            await self._bots.update(bot.id, state=ConnectionState.ONLINE)
        except BaseException:
            if self._sessions.get(key) is handle:
                del self._sessions[key]
                self._connected_at.pop(key, None)
            await handle.destroy()
            if self._owns_state(key):
                await self._bots.update(bot.id, state=ConnectionState.OFFLINE)
            raise

        increment_connect_attempt(ConnectOutcome.SUCCESS)
        set_active_sessions(len(self._sessions))
        logger.info(f"[Session] Bot {key} ({bot.name}) online as {handle.user_tag}")

    def _owns_state(self, key: str) -> bool:
        """False once a disconnect handed the bot to a newer login."""
        current = self._logins.get(key)
        return current is None or current is asyncio.current_task()

    async def _login_failed(self, bot: Bot, outcome: str) -> None:
        increment_connect_attempt(outcome)
        if self._owns_state(bot.id.value):
            await self._bots.update(bot.id, state=ConnectionState.OFFLINE)
        logger.warning(f"[Session] Login for bot {bot.id.value} ({bot.name}) failed: {outcome}")

    # ==================== DISCONNECT ====================

    async def disconnect(self, bot_id: BotId) -> None:
        """Take a bot offline. Idempotent, never raises for unknown bots."""
        key = bot_id.value
        login = self._logins.pop(key, None)
        if login is not None and not login.done():
            logger.info(f"[Session] Cancelling in-flight login for bot {key}")
            login.cancel()
            await asyncio.wait({login})

        if self.is_connecting(bot_id):
            logger.info(f"[Session] Bot {key} reconnecting, disconnect superseded")
            return
        await self._drop_session(key, DisconnectReason.EXPLICIT)
        if self.is_connecting(bot_id):
            return
        await self._bots.update(bot_id, state=ConnectionState.OFFLINE)

    async def _on_remote_disconnect(self, bot_id: BotId, handle: GatewayHandle) -> None:
        """Adapter reported the session lost."""
        key = bot_id.value
        if self._sessions.get(key) is not handle:
            return  # superseded handle
        logger.warning(f"[Session] Bot {key} lost its gateway session")
        await self._drop_session(key, DisconnectReason.REMOTE)
        await self._bots.update(bot_id, state=ConnectionState.OFFLINE)

    async def _drop_session(self, key: str, reason: str) -> None:
        handle = self._sessions.get(key)
        if handle is None:
            return
        try:
            await handle.destroy()
        finally:
            if self._sessions.get(key) is handle:
                del self._sessions[key]
                self._connected_at.pop(key, None)
            increment_session_disconnect(reason)
            set_active_sessions(len(self._sessions))
            logger.info(f"[Session] Session for bot {key} closed ({reason})")

    async def close(self) -> None:
        """Disconnect every bot. Called when the application shuts down."""
        keys = set(self._sessions) | set(self._logins)
        for key in keys:
            await self.disconnect(BotId(key))
        if keys:
            logger.info(f"[Session] Closed {len(keys)} session(s) on shutdown")
