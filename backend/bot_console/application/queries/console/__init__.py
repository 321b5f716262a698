"""Operator console introspection."""

from bot_console.application.queries.console.run_console_command import (
    HELP_TEXT,
    RunConsoleCommandQuery,
    RunConsoleCommandHandler,
)

__all__ = [
    "HELP_TEXT",
    "RunConsoleCommandQuery",
    "RunConsoleCommandHandler",
]
