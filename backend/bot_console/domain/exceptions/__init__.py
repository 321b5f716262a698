"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and the gateway adapter and caught
by the presentation layer, which maps them to HTTP status codes.
"""

from bot_console.domain.exceptions.entity_not_found import EntityNotFoundError
from bot_console.domain.exceptions.access_denied import AccessDeniedError
from bot_console.domain.exceptions.validation_error import (
    DomainValidationError,
    NotTextChannelError,
)
from bot_console.domain.exceptions.not_connected import NotConnectedError
from bot_console.domain.exceptions.gateway_errors import (
    AuthenticationFailedError,
    ConnectFailedError,
    UpstreamError,
)

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
    "NotTextChannelError",
    "NotConnectedError",
    "AuthenticationFailedError",
    "ConnectFailedError",
    "UpstreamError",
]
