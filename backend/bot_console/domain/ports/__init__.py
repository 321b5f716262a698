"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- repositories/  → Bot registry interface
- gateway.py     → Chat platform client (login + per-session handle)
"""

from bot_console.domain.ports.gateway import (
    DisconnectCallback,
    GatewayAdapter,
    GatewayHandle,
)
from bot_console.domain.ports.repositories import BotRepository

__all__ = [
    "BotRepository",
    "GatewayAdapter",
    "GatewayHandle",
    "DisconnectCallback",
]
