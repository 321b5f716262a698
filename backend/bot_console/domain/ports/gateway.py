"""
Gateway Port - Interface to the chat platform client library.
Implementation: bot_console/adapters/discord/discord_gateway.py

The adapter does all wire protocol work (gateway handshake, heartbeats,
REST rate limiting). The console only drives it through these methods.

Errors raised by implementations:
- login(): AuthenticationFailedError for a rejected token,
  ConnectFailedError for anything else. A half-built client is closed first.
- handle methods: EntityNotFoundError, AccessDeniedError,
  NotTextChannelError or UpstreamError.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional

from bot_console.domain.entities.remote import Channel, Guild, Message

DisconnectCallback = Callable[[], Awaitable[None]]


class GatewayHandle(ABC):
    """One live, logged-in connection for a single bot."""

    @abstractmethod
    def is_ready(self) -> bool: ...

    @abstractmethod
    def on_disconnect(self, callback: DisconnectCallback) -> None:
        """Register a coroutine function to run when the platform drops the session."""
        ...

    @property
    @abstractmethod
    def latency_ms(self) -> Optional[int]: ...

    @property
    @abstractmethod
    def guild_count(self) -> int: ...

    @property
    @abstractmethod
    def user_tag(self) -> Optional[str]: ...

    @abstractmethod
    async def fetch_guilds(self) -> list[Guild]: ...

    @abstractmethod
    async def fetch_channels(self, guild_id: str) -> list[Channel]: ...

    @abstractmethod
    async def fetch_messages(self, channel_id: str, limit: int) -> list[Message]: ...

    @abstractmethod
    async def send_message(self, channel_id: str, content: str) -> Message: ...

    @abstractmethod
    async def destroy(self) -> None:
        """Tear down the connection. Safe to call more than once."""
        ...


class GatewayAdapter(ABC):
    @abstractmethod
    async def login(self, token: str) -> GatewayHandle: ...
