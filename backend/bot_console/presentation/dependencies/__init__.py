"""FastAPI dependencies shared by routers."""

from bot_console.presentation.dependencies.bot_path import get_bot_id

__all__ = [
    "get_bot_id",
]
