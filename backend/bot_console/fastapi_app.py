"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints (under Config.API_PREFIX):
- bots, guilds, channels/messages, console commands
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
from dishka import make_async_container
from dishka.integrations.fastapi import setup_dishka

from bot_console.config.logging_config import setup_logging, correlation_id_var
from bot_console.config.settings import Config
from bot_console.setup.ioc.container import AppProvider
from bot_console.observability.metrics import observe_request_latency
from bot_console.presentation.errors import register_exception_handlers
from bot_console.presentation.rate_limit import limiter
from bot_console.presentation.api import (
    bots_router,
    guilds_router,
    messages_router,
    console_router,
    metrics_router,
)

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        # Get correlation ID from header or use default
        correlation_id = request.headers.get("X-Correlation-ID", "NO Correlation ID")

        # Set in contextvars (propagates to async tasks and logging)
        correlation_id_var.set(correlation_id)

        response = await call_next(request)
        response.headers["X-Correlation-ID"] = correlation_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record request latency per route template."""

    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        observe_request_latency(
            method=request.method,
            route=getattr(route, "path", "unmatched"),
            status_code=response.status_code,
            duration=time.perf_counter() - started,
        )
        return response


def create_fastapi_app(provider: Optional[AppProvider] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        provider: DI provider to build the container from. Defaults to the
            production provider (discord.py gateway).

    Returns:
        FastAPI application instance
    """
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    # Container must exist before the app starts: Dishka adds middleware
    container = make_async_container(provider or AppProvider())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        - Startup: container already created
        - Shutdown: close the container, which disconnects every bot
        """
        logger.info("FastAPI application started. DI container initialized.")
        yield
        await container.close()
        logger.info("FastAPI application shutdown. All bot sessions closed.")

    app = FastAPI(
        title="Bot Console API",
        description="Manage Discord bots: connect, browse guilds and channels, read and send messages",
        version="1.0.0",
        lifespan=lifespan,
    )

    setup_dishka(container, app)

    app.state.limiter = limiter

    app.add_middleware(MetricsMiddleware)
    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=Config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Bot console API is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(bots_router, prefix=Config.API_PREFIX)
    app.include_router(guilds_router, prefix=Config.API_PREFIX)
    app.include_router(messages_router, prefix=Config.API_PREFIX)
    app.include_router(console_router, prefix=Config.API_PREFIX)
    app.include_router(metrics_router)

    return app


# ASGI entry point (uvicorn bot_console.fastapi_app:app)
app = create_fastapi_app()
