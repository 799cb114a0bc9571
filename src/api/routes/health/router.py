"""Endpoint de liveness (/api/hello)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from pydantic import BaseModel

from api.routes.common import log_request_received

logger = logging.getLogger(__name__)

router = APIRouter()

HELLO_MESSAGE = "Hello from the Vibra backend!"


class HelloResponse(BaseModel):
    """Resposta do health check."""

    message: str


@router.get("/hello", response_model=HelloResponse)
async def hello(request: Request) -> HelloResponse:
    """Health check: sem dependências externas."""
    log_request_received(logger, "hello", request)
    return HelloResponse(message=HELLO_MESSAGE)
