"""
ConnectionState Value Object - where a bot sits in its session lifecycle.

    offline --connect--> connecting --ready--> online
    connecting --failure/cancel--> offline
    online --disconnect (explicit or pushed)--> offline
"""

from enum import Enum


class ConnectionState(str, Enum):
    OFFLINE = "offline"
    CONNECTING = "connecting"
    ONLINE = "online"
