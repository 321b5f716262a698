"""
Dishka DI Container Setup.

- Registers all dependencies (registry, gateway, session manager, handlers)
- Maps abstract interfaces to concrete implementations
- Manages lifecycle (singleton, request-scoped)

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)

Flow:
  Container → provides → SessionManager (APP) → to → ConnectBotHandler (REQUEST)
                                ↓
                uses BotRepository + GatewayAdapter interfaces
"""

from typing import AsyncIterable, Optional

from dishka import Provider, Scope, provide
from bot_console.adapters.discord import DiscordGateway
from bot_console.application.services.session_manager import SessionManager
from bot_console.domain.ports.gateway import GatewayAdapter
from bot_console.domain.ports.repositories import BotRepository
from bot_console.infrastructure.persistence import InMemoryBotRepository
from bot_console.application.commands.bots import (
    ConnectBotHandler,
    CreateBotHandler,
    DeleteBotHandler,
    DisconnectBotHandler,
)
from bot_console.application.commands.messages import SendMessageHandler
from bot_console.application.queries.bots import ListBotsHandler
from bot_console.application.queries.guilds import (
    ListChannelsHandler,
    ListGuildsHandler,
)
from bot_console.application.queries.messages import ListMessagesHandler
from bot_console.application.queries.console import RunConsoleCommandHandler
from bot_console.config.settings import get_config


class AppProvider(Provider):
    """
    Application dependency provider.

    Args:
        gateway: Gateway adapter to use instead of discord.py (tests pass a fake)
        login_timeout: Seconds a login may take before it counts as failed
            (defaults to the active environment config)
    """

    def __init__(
        self,
        gateway: Optional[GatewayAdapter] = None,
        login_timeout: Optional[float] = None,
    ):
        super().__init__()
        self._gateway = gateway
        if login_timeout is None:
            login_timeout = get_config().DISCORD_LOGIN_TIMEOUT
        self._login_timeout = login_timeout

    # ==================== REGISTRY ====================

    @provide(scope=Scope.APP)
    def get_bot_repository(self) -> BotRepository:
        """
        Provide the bot registry.

        - Scope.APP: the in-memory registry IS the data, so one per app
        """
        return InMemoryBotRepository()

    # ==================== GATEWAY ====================

    @provide(scope=Scope.APP)
    def get_gateway(self) -> GatewayAdapter:
        return self._gateway or DiscordGateway()

    @provide(scope=Scope.APP)
    async def get_session_manager(
        self, bot_repository: BotRepository, gateway: GatewayAdapter
    ) -> AsyncIterable[SessionManager]:
        """
        Provide the session manager (singleton, app-scoped).

        Generator factory: code after yield runs on container.close(),
        so every live bot is disconnected at shutdown.
        """
        manager = SessionManager(
            bot_repository=bot_repository,
            gateway=gateway,
            login_timeout=self._login_timeout,
        )
        yield manager
        await manager.close()

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_bots_handler(self, bot_repository: BotRepository) -> ListBotsHandler:
        return ListBotsHandler(bot_repository)

    @provide(scope=Scope.REQUEST)
    def get_create_bot_handler(self, bot_repository: BotRepository) -> CreateBotHandler:
        return CreateBotHandler(bot_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_bot_handler(
        self, bot_repository: BotRepository, session_manager: SessionManager
    ) -> DeleteBotHandler:
        return DeleteBotHandler(bot_repository, session_manager)

    @provide(scope=Scope.REQUEST)
    def get_connect_bot_handler(self, session_manager: SessionManager) -> ConnectBotHandler:
        return ConnectBotHandler(session_manager)

    @provide(scope=Scope.REQUEST)
    def get_disconnect_bot_handler(
        self, session_manager: SessionManager
    ) -> DisconnectBotHandler:
        return DisconnectBotHandler(session_manager)

    @provide(scope=Scope.REQUEST)
    def get_list_guilds_handler(self, session_manager: SessionManager) -> ListGuildsHandler:
        return ListGuildsHandler(session_manager)

    @provide(scope=Scope.REQUEST)
    def get_list_channels_handler(
        self, session_manager: SessionManager
    ) -> ListChannelsHandler:
        return ListChannelsHandler(session_manager)

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self, session_manager: SessionManager
    ) -> ListMessagesHandler:
        return ListMessagesHandler(session_manager)

    @provide(scope=Scope.REQUEST)
    def get_send_message_handler(self, session_manager: SessionManager) -> SendMessageHandler:
        return SendMessageHandler(session_manager)

    @provide(scope=Scope.REQUEST)
    def get_run_console_command_handler(
        self, bot_repository: BotRepository, session_manager: SessionManager
    ) -> RunConsoleCommandHandler:
        return RunConsoleCommandHandler(bot_repository, session_manager)
