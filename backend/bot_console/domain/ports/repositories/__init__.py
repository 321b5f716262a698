"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation

Infrastructure layer provides implementations.
"""

from bot_console.domain.ports.repositories.bot_repository import BotRepository

__all__ = [
    "BotRepository",
]
