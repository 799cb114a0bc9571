"""Entrypoint da aplicação Vibra backend.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    python -m app.app
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import (
    AppContext,
    create_app_context,
    initialize_app,
    validate_runtime_settings,
)
from app.observability import correlation_id_middleware
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar .env e logging ANTES de criar a app
initialize_app()

logger = get_logger(__name__)

CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Valida as settings do contexto no startup; nada a fechar no shutdown."""
    context: AppContext = app.state.context
    service_name = context.base_settings.service_name
    logger.info("app_starting", extra={"service": service_name})
    validate_runtime_settings(context)
    yield
    logger.info("app_shutting_down", extra={"service": service_name})


def create_app(context: AppContext | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        context: Dependências explícitas. Se None, montadas do ambiente.

    Returns:
        Aplicação FastAPI configurada.
    """
    context = context or create_app_context()

    fastapi_app = FastAPI(
        title="Vibra backend",
        description="Proxy da API Neynar para o frontend de livestream",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.context = context

    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=[context.base_settings.cors_allowed_origin],
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=["*"],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    fastapi_app.include_router(create_api_router())

    logger.info(
        "app_configured",
        extra={"cors_allowed_origin": context.base_settings.cors_allowed_origin},
    )
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    port = get_base_settings().port
    logger.info("server_starting", extra={"port": port})
    uvicorn.run("app.app:app", host="0.0.0.0", port=port, reload=True)


if __name__ == "__main__":
    main()
