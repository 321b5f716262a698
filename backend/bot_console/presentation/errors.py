"""
Error mapping - domain exceptions to HTTP responses.

Every error body has the same shape:
    {"error": "<human readable message>", "kind": "<machine readable kind>"}

The bot token never reaches these handlers: no domain exception carries it.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from bot_console.domain.exceptions import (
    AccessDeniedError,
    AuthenticationFailedError,
    ConnectFailedError,
    DomainValidationError,
    EntityNotFoundError,
    NotConnectedError,
    UpstreamError,
)

logger = logging.getLogger(__name__)

# exception type → (HTTP status, kind)
ERROR_KINDS: dict[type[Exception], tuple[int, str]] = {
    EntityNotFoundError: (status.HTTP_404_NOT_FOUND, "NotFound"),
    DomainValidationError: (status.HTTP_400_BAD_REQUEST, "InvalidInput"),
    NotConnectedError: (status.HTTP_400_BAD_REQUEST, "NotConnected"),
    AuthenticationFailedError: (status.HTTP_400_BAD_REQUEST, "AuthenticationFailed"),
    ConnectFailedError: (status.HTTP_502_BAD_GATEWAY, "ConnectFailed"),
    AccessDeniedError: (status.HTTP_403_FORBIDDEN, "Forbidden"),
    UpstreamError: (status.HTTP_502_BAD_GATEWAY, "UpstreamError"),
}


def error_response(status_code: int, kind: str, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message, "kind": kind, **extra},
    )


def classify(exc: Exception) -> tuple[int, str]:
    for exc_type in type(exc).__mro__:
        if exc_type in ERROR_KINDS:
            return ERROR_KINDS[exc_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR, "InternalError"


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code, kind = classify(exc)
    if status_code >= 500:
        logger.warning(f"[{kind}] {request.method} {request.url.path}: {exc}")
    else:
        logger.info(f"[{kind}] {request.method} {request.url.path}: {exc}")
    return error_response(status_code, kind, str(exc))


def register_exception_handlers(app: FastAPI) -> None:
    for exc_type in ERROR_KINDS:
        app.add_exception_handler(exc_type, domain_exception_handler)

    # Validation error handler - malformed bodies are InvalidInput too
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        logger.info(f"[InvalidInput] {request.method} {request.url.path}: {errors}")
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "InvalidInput",
            "Validation error",
            details=[
                {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
                for err in errors
            ],
        )

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_exception_handler(request: Request, exc: RateLimitExceeded):
        return error_response(
            status.HTTP_429_TOO_MANY_REQUESTS,
            "RateLimited",
            f"Rate limit exceeded: {exc.detail}",
        )

    # HTTP exception handler - unknown routes, wrong methods
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        kind = "NotFound" if exc.status_code == 404 else "HttpError"
        return error_response(exc.status_code, kind, str(exc.detail))

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"[InternalError] {request.method} {request.url.path}")
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "InternalError",
            f"Internal server error: {type(exc).__name__}",
        )
