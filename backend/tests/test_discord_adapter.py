"""
Unit tests for the discord.py adapter: mapping, error translation and
session bookkeeping. No network access.

Run with: pytest tests/test_discord_adapter.py -v
"""

import asyncio
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import discord
import pytest
from bot_console.adapters.discord import DiscordSession, build_intents
from bot_console.adapters.discord import discord_mapper as mapper
from bot_console.adapters.discord.discord_session import _translate_errors
from bot_console.domain.exceptions import (
    AccessDeniedError,
    EntityNotFoundError,
    UpstreamError,
)
from bot_console.domain.value_objects.channel_kind import ChannelKind


def _http_response(status, reason="error"):
    return MagicMock(status=status, reason=reason)


class TestMapper:
    """Test discord.py object → domain entity conversion."""

    def test_guild_prefers_approximate_member_count(self):
        guild = SimpleNamespace(
            id=123,
            name="Guild",
            icon=SimpleNamespace(key="iconhash"),
            approximate_member_count=10,
            member_count=3,
        )

        result = mapper.to_guild(guild)

        assert result.id == "123"
        assert result.icon == "iconhash"
        assert result.member_count == 10

    def test_guild_falls_back_to_member_count(self):
        guild = SimpleNamespace(
            id=1, name="Guild", icon=None, approximate_member_count=None, member_count=3
        )

        result = mapper.to_guild(guild)

        assert result.member_count == 3
        assert result.icon is None

    def test_partial_guild(self):
        result = mapper.to_partial_guild(SimpleNamespace(id=5, name="Partial"))
        assert (result.id, result.name, result.member_count) == ("5", "Partial", None)

    @pytest.mark.parametrize(
        "channel_type,kind",
        [
            (discord.ChannelType.text, ChannelKind.TEXT),
            (discord.ChannelType.voice, ChannelKind.VOICE),
            (discord.ChannelType.category, ChannelKind.CATEGORY),
            (discord.ChannelType.news, ChannelKind.ANNOUNCEMENT),
            (discord.ChannelType.forum, ChannelKind.FORUM),
            (discord.ChannelType.public_thread, ChannelKind.THREAD),
            (discord.ChannelType.private, ChannelKind.OTHER),
        ],
    )
    def test_channel_kind(self, channel_type, kind):
        assert mapper.to_channel_kind(channel_type) is kind

    def test_channel(self):
        channel = SimpleNamespace(
            id=9, name="general", type=discord.ChannelType.text, position=2, category_id=7
        )

        result = mapper.to_channel(channel)

        assert result.id == "9"
        assert result.kind is ChannelKind.TEXT
        assert result.position == 2
        assert result.parent_id == "7"

    def test_channel_without_category(self):
        channel = SimpleNamespace(
            id=9, name="general", type=discord.ChannelType.text, position=0, category_id=None
        )
        assert mapper.to_channel(channel).parent_id is None

    def test_message(self):
        created = datetime(2024, 5, 1, tzinfo=timezone.utc)
        message = SimpleNamespace(
            id=77,
            content="hi",
            created_at=created,
            author=SimpleNamespace(id=3, name="alice", avatar=None, bot=False),
            attachments=[
                SimpleNamespace(id=1, url="https://cdn/a.png", filename="a.png"),
                SimpleNamespace(id=2, url="https://cdn/b", filename=""),
            ],
        )

        result = mapper.to_message(message)

        assert result.id == "77"
        assert result.timestamp == created
        assert result.author.username == "alice"
        assert result.author.avatar is None
        assert result.author.is_bot is False
        assert [a.filename for a in result.attachments] == ["a.png", "file"]


class TestErrorTranslation:
    def test_not_found(self):
        with pytest.raises(EntityNotFoundError, match="Channel not found"):
            with _translate_errors("Channel not found"):
                raise discord.NotFound(_http_response(404), "Unknown Channel")

    def test_forbidden(self):
        with pytest.raises(AccessDeniedError):
            with _translate_errors("Channel not found"):
                raise discord.Forbidden(_http_response(403), "Missing Access")

    def test_other_http_error_keeps_status(self):
        with pytest.raises(UpstreamError) as exc_info:
            with _translate_errors("Channel not found"):
                raise discord.HTTPException(_http_response(500), "Server error")
        assert exc_info.value.status == 500

    def test_client_library_error(self):
        with pytest.raises(UpstreamError):
            with _translate_errors("Channel not found"):
                raise discord.ClientException("not ready")


class TestIntents:
    def test_console_intents(self):
        intents = build_intents()
        assert intents.guilds
        assert intents.guild_messages
        assert intents.message_content
        assert intents.members


class TestDiscordSession:
    """Session bookkeeping with the discord.py client stubbed out."""

    @pytest.mark.asyncio
    async def test_latency_unknown_before_heartbeat(self):
        session = DiscordSession(build_intents())
        session._client = SimpleNamespace(latency=float("nan"))
        assert session.latency_ms is None

        session._client = SimpleNamespace(latency=0.0421)
        assert session.latency_ms == 42

    @pytest.mark.asyncio
    async def test_gateway_end_fires_disconnect_callbacks(self):
        session = DiscordSession(build_intents())
        session._client = MagicMock(user="bot#0001")
        fired = asyncio.Event()

        async def on_lost():
            fired.set()

        session.on_disconnect(on_lost)
        ended = asyncio.create_task(asyncio.sleep(0))
        await ended

        session._on_gateway_closed(ended)

        await asyncio.wait_for(fired.wait(), timeout=1)

    @pytest.mark.asyncio
    async def test_destroy_is_idempotent_and_silent(self):
        session = DiscordSession(build_intents())
        session._client = MagicMock(user="bot#0001", close=AsyncMock())
        on_lost = AsyncMock()
        session.on_disconnect(on_lost)

        await session.destroy()
        await session.destroy()
        ended = asyncio.create_task(asyncio.sleep(0))
        await ended
        session._on_gateway_closed(ended)
        await asyncio.sleep(0)

        session._client.close.assert_awaited_once()
        on_lost.assert_not_called()
        assert session.is_ready() is False
