"""
Persistence Layer - Registry implementations.

Contains the in-memory repository implementation for the BotRepository port.
"""

from bot_console.infrastructure.persistence.memory_bot_repository import (
    InMemoryBotRepository,
)

__all__ = [
    "InMemoryBotRepository",
]
