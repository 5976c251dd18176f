"""Linear webhook and health-check routes."""

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from linear_discord.domain.dispatcher import build_message
from linear_discord.domain.parser import parse_notification

logger = logging.getLogger(__name__)

webhook_router = APIRouter(tags=["Webhook"])

FAILURE_MESSAGE = "Failed to process webhook"


class StatusResponse(BaseModel):
    status: str


class ErrorResponse(BaseModel):
    error: str


def _failure() -> JSONResponse:
    return JSONResponse(
        status_code=500, content=ErrorResponse(error=FAILURE_MESSAGE).model_dump()
    )


@webhook_router.post(
    "/", response_model=StatusResponse, responses={500: {"model": ErrorResponse}}
)
async def receive_webhook(request: Request):
    """Format a Linear notification and relay it to Discord."""
    sink = request.app.state.sink
    try:
        payload = await request.json()
        logger.debug("Received webhook from Linear: %s", json.dumps(payload, indent=2))
        message = build_message(parse_notification(payload))
        await sink.send(message)
    except Exception:
        logger.exception("Error processing webhook")
        return _failure()
    return StatusResponse(status="success")


@webhook_router.get("/health", response_model=StatusResponse)
async def health():
    return StatusResponse(status="ok")
