"""Helpers compartilhados pelas rotas: log de entrada e erros HTTP.

Detalhes internos de erro vão para o log, nunca para o body.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from fastapi import HTTPException, Request, status

INTERNAL_ERROR_DETAIL = "Internal Server Error"
BAD_REQUEST_DETAIL = "Bad Request"


def log_request_received(logger: logging.Logger, handler: str, request: Request) -> None:
    """Loga request inbound com handler, método, path e remote."""
    client = request.client
    logger.info(
        "request_received",
        extra={
            "handler": handler,
            "method": request.method,
            "path": request.url.path,
            "remote": f"{client.host}:{client.port}" if client else "",
        },
    )


def raise_internal_error(logger: logging.Logger, event: str, exc: Exception) -> NoReturn:
    """Loga a falha e responde 500 genérico."""
    logger.error(event, extra={"error_type": type(exc).__name__, "error": str(exc)})
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=INTERNAL_ERROR_DETAIL,
    ) from exc


def raise_bad_request(
    logger: logging.Logger,
    event: str,
    exc: Exception | None = None,
    detail: str = BAD_REQUEST_DETAIL,
) -> NoReturn:
    """Loga input inválido do caller e responde 400."""
    logger.warning(event, extra={"error_type": type(exc).__name__ if exc else None})
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail) from exc
