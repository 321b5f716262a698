"""
DomainValidationError - Raised when input breaks a business rule.
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotTextChannelError(DomainValidationError):
    """The channel exists but is not a guild text channel."""

    def __init__(self, channel_id: str):
        super().__init__(f"Channel {channel_id} is not a text channel")
        self.channel_id = channel_id
