"""Endpoints de autenticação via signer Farcaster.

Endpoints:
- POST /api/auth/login: cria signer e registra a signed key (pass-through)
- GET /api/auth/signer-status?signer_uuid=...: status do signer (pass-through)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from api.routes.common import log_request_received, raise_bad_request, raise_internal_error
from app.bootstrap.dependencies import AppContext, get_app_context
from utils.errors import VibraError

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_SIGNER_UUID_DETAIL = "Missing signer_uuid parameter"


@router.post("/login")
async def login(
    request: Request,
    context: AppContext = Depends(get_app_context),
) -> dict[str, Any]:
    """Cria e registra um signer; resposta traz signer_approval_url."""
    log_request_received(logger, "login", request)
    try:
        signed_key = await context.neynar_client.get_signed_key()
    except VibraError as exc:
        raise_internal_error(logger, "get_signed_key_failed", exc)

    logger.info("response_sent", extra={"handler": "login"})
    return signed_key


@router.get("/signer-status")
async def signer_status(
    request: Request,
    signer_uuid: str | None = None,
    context: AppContext = Depends(get_app_context),
) -> dict[str, Any]:
    """Consulta status de aprovação do signer."""
    log_request_received(logger, "signer_status", request)
    if not signer_uuid:
        raise_bad_request(logger, "signer_uuid_missing", detail=MISSING_SIGNER_UUID_DETAIL)

    try:
        signer = await context.neynar_client.lookup_signer(signer_uuid)
    except VibraError as exc:
        raise_internal_error(logger, "lookup_signer_failed", exc)

    logger.info("response_sent", extra={"handler": "signer_status"})
    return signer
