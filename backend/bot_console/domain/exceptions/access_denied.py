"""
AccessDeniedError - Raised when Discord refuses an operation for lack of permissions.
Maps to: HTTP 403 Forbidden
"""


class AccessDeniedError(Exception):
    """Raised when the bot lacks permission on the remote resource"""

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)
