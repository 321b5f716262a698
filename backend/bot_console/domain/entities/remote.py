"""
Remote Entities - Read-through projections of what Discord reports.

Fetched on demand through the gateway handle and never cached by the console.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from bot_console.domain.value_objects.channel_kind import ChannelKind


@dataclass(frozen=True)
class Guild:
    id: str
    name: str
    icon: Optional[str] = None
    member_count: Optional[int] = None


@dataclass(frozen=True)
class Channel:
    id: str
    name: str
    kind: ChannelKind
    position: int
    parent_id: Optional[str] = None

    @property
    def is_text(self) -> bool:
        return self.kind is ChannelKind.TEXT


@dataclass(frozen=True)
class MessageAuthor:
    id: str
    username: str
    avatar: Optional[str] = None
    is_bot: bool = False


@dataclass(frozen=True)
class Attachment:
    id: str
    url: str
    filename: str = "file"


@dataclass(frozen=True)
class Message:
    id: str
    content: str
    author: MessageAuthor
    timestamp: datetime
    attachments: list[Attachment] = field(default_factory=list)
