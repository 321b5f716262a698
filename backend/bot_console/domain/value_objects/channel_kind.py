"""
ChannelKind Value Object - platform-neutral channel type.
"""

from enum import Enum


class ChannelKind(str, Enum):
    TEXT = "text"
    VOICE = "voice"
    CATEGORY = "category"
    ANNOUNCEMENT = "announcement"
    FORUM = "forum"
    STAGE = "stage"
    THREAD = "thread"
    OTHER = "other"
