"""
Gateway errors - failures reported by the chat platform.

AuthenticationFailedError -> HTTP 400 (login rejected)
ConnectFailedError        -> HTTP 502 (network error or timeout during login)
UpstreamError             -> HTTP 502 (any unclassified adapter failure)
"""


class AuthenticationFailedError(Exception):
    """The platform rejected the bot credential."""

    def __init__(self, message: str = "Invalid token or login failed"):
        super().__init__(message)


class ConnectFailedError(Exception):
    """Login could not complete for a reason other than a bad credential."""

    def __init__(self, message: str = "Failed to connect bot"):
        super().__init__(message)


class UpstreamError(Exception):
    """Unclassified failure from the gateway adapter."""

    def __init__(self, message: str = "Upstream request failed", status: int | None = None):
        super().__init__(message)
        self.status = status
