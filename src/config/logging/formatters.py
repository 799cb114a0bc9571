"""Formatter JSON dos logs do serviço.

Exemplo de output:
    {"asctime": "2026-10-19 10:30:00,123", "level": "INFO",
     "logger": "api.routes.livestream.router", "message": "request_received",
     "correlation_id": "abc-123", "service": "vibra-backend",
     "handler": "present", "method": "GET", "path": "/api/present"}
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem fixa dos campos base; extras são anexados pelo JsonFormatter
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados."""
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
