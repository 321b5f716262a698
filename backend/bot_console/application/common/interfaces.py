"""
Base interfaces for CQRS pattern.

Usage:
    @dataclass(frozen=True)
    class ConnectBotCommand(Command[ConnectBotResult]):
        bot_id: BotId

    class ConnectBotHandler(CommandHandler[ConnectBotResult]):
        def __init__(self, session_manager: SessionManager):
            self._session_manager = session_manager

        async def execute(self, cmd: ConnectBotCommand) -> ConnectBotResult:
            connected_now = await self._session_manager.connect(cmd.bot_id)
            return ConnectBotResult(already_connected=not connected_now)
"""
from abc import ABC, abstractmethod
from typing import TypeVar, Generic

T = TypeVar("T")
class Command(ABC, Generic[T]):
    """Base class for write operations"""
    pass

class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Execute the command and return a result of type T"""
        ...

class Query(ABC, Generic[T]):
    """Base class for read operations"""
    pass

class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Execute the query and return a result of type T"""
        ...
