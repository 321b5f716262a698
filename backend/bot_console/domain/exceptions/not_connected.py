"""
NotConnectedError - Raised when an operation needs an online session that doesn't exist.
Maps to: HTTP 400 Bad Request
"""


class NotConnectedError(Exception):
    """The bot has no live, ready gateway session."""

    def __init__(self, message: str = "Bot not connected"):
        super().__init__(message)
