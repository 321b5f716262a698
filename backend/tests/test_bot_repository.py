"""
Unit tests for the Bot entity and InMemoryBotRepository.

Run with: pytest tests/test_bot_repository.py -v
"""

import pytest
from bot_console.domain.entities.bot import Bot
from bot_console.domain.exceptions import DomainValidationError
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.domain.value_objects.connection_state import ConnectionState
from bot_console.infrastructure.persistence import InMemoryBotRepository


class TestBotCreate:
    """Test the Bot factory."""

    def test_create_starts_offline_with_fresh_id(self):
        bot = Bot.create("Helper", "secret")

        assert bot.name == "Helper"
        assert bot.token == "secret"
        assert bot.state is ConnectionState.OFFLINE
        assert bot.created_at.tzinfo is not None

    def test_create_generates_distinct_ids(self):
        assert Bot.create("a", "t").id != Bot.create("b", "t").id

    def test_create_strips_name_only(self):
        """The credential is opaque and stored exactly as given."""
        bot = Bot.create("  Helper  ", "  tok ")
        assert bot.name == "Helper"
        assert bot.token == "  tok "

    @pytest.mark.parametrize("name", ["", "   "])
    def test_create_rejects_blank_name(self, name):
        with pytest.raises(DomainValidationError, match="name"):
            Bot.create(name, "secret")

    def test_create_rejects_blank_token(self):
        with pytest.raises(DomainValidationError, match="Token"):
            Bot.create("Helper", "  ")

    def test_repr_hides_token(self):
        assert "secret" not in repr(Bot.create("Helper", "secret"))


class TestBotId:
    def test_rejects_non_uuid(self):
        with pytest.raises(ValueError):
            BotId("not-a-uuid")

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            BotId("")


class TestInMemoryBotRepository:
    """Test registry storage semantics."""

    @pytest.mark.asyncio
    async def test_insert_then_get(self):
        repo = InMemoryBotRepository()
        bot = Bot.create("Helper", "secret")

        await repo.insert(bot)
        stored = await repo.get_by_id(bot.id)

        assert stored == bot

    @pytest.mark.asyncio
    async def test_list_all_keeps_registration_order(self):
        repo = InMemoryBotRepository()
        bots = [Bot.create(f"bot-{i}", "t") for i in range(3)]
        for bot in bots:
            await repo.insert(bot)

        listed = await repo.list_all()

        assert [b.name for b in listed] == ["bot-0", "bot-1", "bot-2"]

    @pytest.mark.asyncio
    async def test_get_unknown_returns_none(self):
        repo = InMemoryBotRepository()
        assert await repo.get_by_id(BotId.generate()) is None

    @pytest.mark.asyncio
    async def test_duplicate_insert_rejected(self):
        repo = InMemoryBotRepository()
        bot = Bot.create("Helper", "secret")
        await repo.insert(bot)

        with pytest.raises(ValueError):
            await repo.insert(bot)

    @pytest.mark.asyncio
    async def test_returned_copies_do_not_alias_storage(self):
        repo = InMemoryBotRepository()
        bot = Bot.create("Helper", "secret")
        await repo.insert(bot)

        fetched = await repo.get_by_id(bot.id)
        fetched.state = ConnectionState.ONLINE

        assert (await repo.get_by_id(bot.id)).state is ConnectionState.OFFLINE

    @pytest.mark.asyncio
    async def test_update_state(self):
        repo = InMemoryBotRepository()
        bot = Bot.create("Helper", "secret")
        await repo.insert(bot)

        updated = await repo.update(bot.id, state=ConnectionState.CONNECTING)

        assert updated.state is ConnectionState.CONNECTING
        assert (await repo.get_by_id(bot.id)).state is ConnectionState.CONNECTING

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self):
        repo = InMemoryBotRepository()
        assert await repo.update(BotId.generate(), state=ConnectionState.OFFLINE) is None

    @pytest.mark.asyncio
    async def test_update_refuses_token_and_id(self):
        repo = InMemoryBotRepository()
        bot = Bot.create("Helper", "secret")
        await repo.insert(bot)

        with pytest.raises(ValueError):
            await repo.update(bot.id, token="other")

    @pytest.mark.asyncio
    async def test_remove(self):
        repo = InMemoryBotRepository()
        bot = Bot.create("Helper", "secret")
        await repo.insert(bot)

        assert await repo.remove(bot.id) is True
        assert await repo.remove(bot.id) is False
        assert await repo.list_all() == []
