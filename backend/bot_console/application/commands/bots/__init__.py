"""Bot registry and lifecycle commands."""

from .create_bot import CreateBotCommand, CreateBotHandler
from .delete_bot import DeleteBotCommand, DeleteBotHandler
from .connect_bot import ConnectBotCommand, ConnectBotHandler, ConnectBotResult
from .disconnect_bot import DisconnectBotCommand, DisconnectBotHandler

__all__ = [
    "CreateBotCommand",
    "CreateBotHandler",
    "DeleteBotCommand",
    "DeleteBotHandler",
    "ConnectBotCommand",
    "ConnectBotHandler",
    "ConnectBotResult",
    "DisconnectBotCommand",
    "DisconnectBotHandler",
]
