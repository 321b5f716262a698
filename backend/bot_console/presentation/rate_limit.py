"""Rate limiter shared by routers (slowapi, keyed by client address)."""

from slowapi import Limiter
from slowapi.util import get_remote_address
from bot_console.config.settings import get_config

_config = get_config()

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=_config.RATELIMIT_STORAGE_URI,
    enabled=_config.RATE_LIMIT_ENABLED,
)
