"""Application services - stateful orchestration shared by handlers."""

from bot_console.application.services.session_manager import SessionManager

__all__ = [
    "SessionManager",
]
