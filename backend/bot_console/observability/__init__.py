"""Observability package for the Bot Console Backend."""

from bot_console.observability.metrics import (
    set_active_sessions,
    increment_connect_attempt,
    increment_session_disconnect,
    increment_upstream_error,
    observe_request_latency,
    get_metrics_content,
    ConnectOutcome,
    DisconnectReason,
)

__all__ = [
    "set_active_sessions",
    "increment_connect_attempt",
    "increment_session_disconnect",
    "increment_upstream_error",
    "observe_request_latency",
    "get_metrics_content",
    "ConnectOutcome",
    "DisconnectReason",
]
