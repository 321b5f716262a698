"""
Bot Entity - A registered Discord bot account managed by the console.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone

from bot_console.domain.exceptions import DomainValidationError
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.domain.value_objects.connection_state import ConnectionState


@dataclass
class Bot:
    id: BotId
    name: str
    token: str = field(repr=False)  # credential, never leaves the backend
    state: ConnectionState = ConnectionState.OFFLINE
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, name: str, token: str) -> Bot:
        """Factory method to register a new bot with a generated ID, offline."""
        name = (name or "").strip()
        token = token or ""
        if not name:
            raise DomainValidationError("Bot name is required")
        # the credential is opaque: checked for blankness, stored as given
        if not token.strip():
            raise DomainValidationError("Token is required")
        return cls(id=BotId.generate(), name=name, token=token)

    @property
    def is_online(self) -> bool:
        return self.state is ConnectionState.ONLINE
