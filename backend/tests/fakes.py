"""
In-memory stand-ins for the Discord gateway.

FakeGateway hands out FakeHandles that serve a small fixed guild:

    guild g-1 "Test Guild"
      category  c-cat      "Info"      position 0
      text      c-alpha    "alpha"     position 0
      text      c-general  "general"   position 1   (3 messages)
      text      c-random   "random"    position 1
      text      c-readonly "readonly"  position 2   (sending is forbidden)
      voice     c-voice    "Lounge"    position 0
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Optional

from bot_console.domain.entities.remote import (
    Attachment,
    Channel,
    Guild,
    Message,
    MessageAuthor,
)
from bot_console.domain.exceptions import (
    AccessDeniedError,
    AuthenticationFailedError,
    EntityNotFoundError,
    NotTextChannelError,
)
from bot_console.domain.ports.gateway import DisconnectCallback, GatewayAdapter, GatewayHandle
from bot_console.domain.value_objects.channel_kind import ChannelKind

BAD_TOKEN = "bad-token"

GUILD = Guild(id="g-1", name="Test Guild", icon="abc123", member_count=42)

CHANNELS = [
    Channel(id="c-general", name="general", kind=ChannelKind.TEXT, position=1),
    Channel(id="c-voice", name="Lounge", kind=ChannelKind.VOICE, position=0),
    Channel(id="c-random", name="random", kind=ChannelKind.TEXT, position=1),
    Channel(id="c-cat", name="Info", kind=ChannelKind.CATEGORY, position=0),
    Channel(id="c-readonly", name="readonly", kind=ChannelKind.TEXT, position=2),
    Channel(id="c-alpha", name="alpha", kind=ChannelKind.TEXT, position=0, parent_id="c-cat"),
]

FORBIDDEN_CHANNELS = {"c-readonly"}

_T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
USER = MessageAuthor(id="u-1", username="alice", avatar="av1")
BOT_USER = MessageAuthor(id="u-bot", username="console-bot", is_bot=True)


def seed_messages() -> dict[str, list[Message]]:
    """History per channel, newest first like Discord returns it."""
    return {
        "c-general": [
            Message(id="m-3", content="third", author=USER, timestamp=_T0 + timedelta(minutes=2)),
            Message(
                id="m-2",
                content="second",
                author=USER,
                timestamp=_T0 + timedelta(minutes=1),
                attachments=[Attachment(id="a-1", url="https://cdn.example/a.png", filename="a.png")],
            ),
            Message(id="m-1", content="first", author=USER, timestamp=_T0),
        ],
        "c-random": [],
        "c-alpha": [],
        "c-readonly": [],
    }


class FakeHandle(GatewayHandle):
    def __init__(self, token: str):
        self.token = token
        self.ready = True
        self.destroy_calls = 0
        self.latency: Optional[int] = 42
        self.messages = seed_messages()
        self.sent: list[Message] = []
        # Raised by every fetch/send while set
        self.failure: Optional[Exception] = None
        self._callbacks: list[DisconnectCallback] = []

    def is_ready(self) -> bool:
        return self.ready

    def on_disconnect(self, callback: DisconnectCallback) -> None:
        self._callbacks.append(callback)

    @property
    def latency_ms(self) -> Optional[int]:
        return self.latency

    @property
    def guild_count(self) -> int:
        return 1

    @property
    def user_tag(self) -> Optional[str]:
        return "console-bot#0001"

    async def fetch_guilds(self) -> list[Guild]:
        self._maybe_fail()
        return [GUILD]

    async def fetch_channels(self, guild_id: str) -> list[Channel]:
        self._maybe_fail()
        if guild_id != GUILD.id:
            raise EntityNotFoundError("Guild not found or bot doesn't have access")
        return list(CHANNELS)

    async def fetch_messages(self, channel_id: str, limit: int) -> list[Message]:
        self._maybe_fail()
        self._require_text_channel(channel_id)
        return self.messages[channel_id][:limit]

    async def send_message(self, channel_id: str, content: str) -> Message:
        self._maybe_fail()
        self._require_text_channel(channel_id)
        if channel_id in FORBIDDEN_CHANNELS:
            raise AccessDeniedError(
                "Bot does not have permission to send messages in this channel"
            )
        message = Message(
            id=f"sent-{len(self.sent) + 1}",
            content=content,
            author=BOT_USER,
            timestamp=datetime.now(timezone.utc),
        )
        self.sent.append(message)
        self.messages[channel_id].insert(0, message)
        return message

    async def destroy(self) -> None:
        self.destroy_calls += 1
        self.ready = False

    async def drop(self) -> None:
        """Simulate the platform closing the session."""
        self.ready = False
        for callback in list(self._callbacks):
            await callback()

    def _maybe_fail(self) -> None:
        if self.failure is not None:
            raise self.failure

    def _require_text_channel(self, channel_id: str) -> None:
        channel = next((c for c in CHANNELS if c.id == channel_id), None)
        if channel is None:
            raise EntityNotFoundError("Channel not found")
        if not channel.is_text:
            raise NotTextChannelError(channel_id)


class FakeGateway(GatewayAdapter):
    """
    Gateway whose login outcome is controlled by the test.

    - token BAD_TOKEN → AuthenticationFailedError
    - `failure` set   → raised instead of logging in
    - `delay`         → seconds each login takes
    """

    def __init__(self):
        self.login_calls = 0
        self.delay = 0.0
        self.failure: Optional[Exception] = None
        self.handles: list[FakeHandle] = []

    async def login(self, token: str) -> GatewayHandle:
        self.login_calls += 1
        if self.delay:
            await asyncio.sleep(self.delay)
        if token == BAD_TOKEN:
            raise AuthenticationFailedError()
        if self.failure is not None:
            raise self.failure
        handle = FakeHandle(token)
        self.handles.append(handle)
        return handle

    @property
    def last_handle(self) -> FakeHandle:
        return self.handles[-1]
