"""
API Routers - FastAPI endpoint definitions.
"""

from bot_console.presentation.api.bots import router as bots_router
from bot_console.presentation.api.guilds import router as guilds_router
from bot_console.presentation.api.messages import router as messages_router
from bot_console.presentation.api.console import router as console_router
from bot_console.presentation.api.metrics import router as metrics_router

__all__ = [
    "bots_router",
    "guilds_router",
    "messages_router",
    "console_router",
    "metrics_router",
]
