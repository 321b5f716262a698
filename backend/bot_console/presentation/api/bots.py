"""
Bots API Router - registry and connection lifecycle.

- Thin layer: only handles HTTP concerns (request/response)
- Receives handlers via Dependency Injection (Dishka)
- Domain exceptions are mapped to HTTP centrally (presentation/errors.py)

Flow:
  HTTP Request → Router → Command → Handler → SessionManager → Gateway
                                 ↓
  HTTP Response ← Router ← Result ←
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, Request, status
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from bot_console.application.commands.bots import (
    ConnectBotCommand,
    ConnectBotHandler,
    CreateBotCommand,
    CreateBotHandler,
    DeleteBotCommand,
    DeleteBotHandler,
    DisconnectBotCommand,
    DisconnectBotHandler,
)
from bot_console.application.queries.bots import ListBotsHandler, ListBotsQuery
from bot_console.application.dto import BotDTO
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.presentation.dependencies import get_bot_id
from bot_console.presentation.rate_limit import limiter
from bot_console.config.settings import Config

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateBotRequest(BaseModel):
    """Request body for registering a bot. Emptiness is checked by the Bot entity."""

    name: str
    credential: str


class SuccessResponse(BaseModel):
    success: bool
    message: Optional[str] = None


# ==================== ROUTER ====================

router = APIRouter(prefix="/bots", tags=["bots"])


# ==================== ENDPOINTS ====================


@router.get("", response_model=list[BotDTO])
@inject
async def list_bots(handler: FromDishka[ListBotsHandler]):
    """List registered bots. Tokens are never included."""
    bots = await handler.execute(ListBotsQuery())
    return [BotDTO.from_entity(bot) for bot in bots]


@router.post(
    "",
    response_model=BotDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_bot(
    request: CreateBotRequest,
    handler: FromDishka[CreateBotHandler],
):
    """Register a new bot. It starts offline."""
    bot = await handler.execute(
        CreateBotCommand(name=request.name, token=request.credential)
    )
    logger.info(f"Registered bot {bot.id.value} ({bot.name})")
    return BotDTO.from_entity(bot)


@router.delete("/{bot_id}", response_model=SuccessResponse)
@inject
async def delete_bot(
    handler: FromDishka[DeleteBotHandler],
    bot_id: BotId = Depends(get_bot_id),
):
    """Delete a bot, disconnecting it first."""
    success = await handler.execute(DeleteBotCommand(bot_id=bot_id))
    return SuccessResponse(success=success)


@router.post("/{bot_id}/connect", response_model=SuccessResponse)
@limiter.limit(Config.CONNECT_RATE_LIMIT)
@inject
async def connect_bot(
    request: Request,
    handler: FromDishka[ConnectBotHandler],
    bot_id: BotId = Depends(get_bot_id),
):
    """
    Connect a bot to the Discord gateway.

    Idempotent: an already connected bot returns success with a message,
    and concurrent calls share one login.
    """
    result = await handler.execute(ConnectBotCommand(bot_id=bot_id))
    if result.already_connected:
        return SuccessResponse(success=True, message="Already connected")
    return SuccessResponse(success=True)


@router.post("/{bot_id}/disconnect", response_model=SuccessResponse)
@inject
async def disconnect_bot(
    handler: FromDishka[DisconnectBotHandler],
    bot_id: BotId = Depends(get_bot_id),
):
    """Disconnect a bot. Safe to call when it is already offline."""
    await handler.execute(DisconnectBotCommand(bot_id=bot_id))
    return SuccessResponse(success=True)
