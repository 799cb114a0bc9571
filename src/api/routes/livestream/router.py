"""Endpoints do livestream.

Endpoints:
- GET /api/present: cast do livestream + replies diretas (normalizados)
- POST /api/cast: publica reply no cast do livestream (pass-through)
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from api.routes.common import log_request_received, raise_bad_request, raise_internal_error
from app.bootstrap.dependencies import AppContext, get_app_context
from app.use_cases.livestream import parse_cast_text
from utils.errors import BadRequestError, VibraError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/present")
async def present_livestream(
    request: Request,
    context: AppContext = Depends(get_app_context),
) -> dict[str, Any]:
    """Retorna livestreamData + repliesToLivestream."""
    log_request_received(logger, "present", request)
    try:
        present = await context.present_livestream_use_case().execute()
    except VibraError as exc:
        raise_internal_error(logger, "present_livestream_failed", exc)

    logger.info("response_sent", extra={"handler": "present"})
    return present.to_response()


@router.post("/cast")
async def write_cast(
    request: Request,
    context: AppContext = Depends(get_app_context),
) -> dict[str, Any]:
    """Publica cast; body esperado: ``{"text": "..."}``."""
    log_request_received(logger, "write_cast", request)
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise_bad_request(logger, "cast_body_invalid_json", exc)

    try:
        text = parse_cast_text(body)
    except BadRequestError as exc:
        raise_bad_request(logger, "cast_body_invalid", exc)

    try:
        response = await context.write_cast_use_case().execute(text)
    except VibraError as exc:
        raise_internal_error(logger, "write_cast_failed", exc)

    logger.info("response_sent", extra={"handler": "write_cast"})
    return response
