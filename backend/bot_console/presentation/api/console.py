"""Console API Router - local introspection commands (/ping, /status, ...)."""

from fastapi import APIRouter, Depends
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel
from bot_console.application.queries.console import (
    RunConsoleCommandHandler,
    RunConsoleCommandQuery,
)
from bot_console.domain.value_objects.bot_id import BotId
from bot_console.presentation.dependencies import get_bot_id


class ConsoleCommandRequest(BaseModel):
    command: str


class ConsoleCommandResponse(BaseModel):
    result: str


router = APIRouter(prefix="/bots/{bot_id}/commands", tags=["console"])


@router.post("", response_model=ConsoleCommandResponse)
@inject
async def run_command(
    request: ConsoleCommandRequest,
    handler: FromDishka[RunConsoleCommandHandler],
    bot_id: BotId = Depends(get_bot_id),
):
    """Answer a console command from local state. Never touches Discord."""
    result = await handler.execute(
        RunConsoleCommandQuery(bot_id=bot_id, command=request.command)
    )
    return ConsoleCommandResponse(result=result)
