"""
MessageContent Value Object - text of an outgoing message.
"""

from dataclasses import dataclass

from bot_console.domain.exceptions import DomainValidationError

MAX_MESSAGE_LENGTH = 2000


@dataclass(frozen=True)
class MessageContent:
    value: str

    def __post_init__(self):
        if not self.value:
            raise DomainValidationError("Message cannot be empty")
        if len(self.value) > MAX_MESSAGE_LENGTH:
            raise DomainValidationError(
                f"Message too long (max {MAX_MESSAGE_LENGTH} characters)"
            )

    def __str__(self) -> str:
        return self.value
