"""Bootstrap da aplicação: inicialização e wiring.

Uso:
    from app.bootstrap import initialize_app, create_app_context

    initialize_app()
    context = create_app_context()
"""

from __future__ import annotations

import logging
import os

from dotenv import find_dotenv, load_dotenv

from app.bootstrap.dependencies import AppContext, create_app_context, get_app_context
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings

DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)

__all__ = [
    "AppContext",
    "create_app_context",
    "get_app_context",
    "initialize_app",
    "validate_runtime_settings",
]


def initialize_app() -> None:
    """Carrega .env (se existir) e configura logging JSON.

    O .env é procurado a partir do diretório de trabalho, subindo até a raiz.
    Variáveis já definidas no ambiente têm precedência sobre o .env.
    """
    load_dotenv(find_dotenv(usecwd=True), override=False)
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=get_base_settings().service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(context: AppContext) -> None:
    """Valida as settings que a app servida realmente usa.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    environment = context.base_settings.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in context.base_settings.validate())
    errors.extend(f"neynar: {error}" for error in context.neynar_settings.validate())
    errors.extend(f"livestream: {error}" for error in context.livestream_settings.validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
