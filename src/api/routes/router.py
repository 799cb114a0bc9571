"""Agregador de rotas: registra todos os routers sob /api.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.auth import router as auth_router
from api.routes.health import router as health_router
from api.routes.livestream import router as livestream_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter(prefix="/api")

    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(livestream_router, tags=["livestream"])
    api_router.include_router(auth_router, prefix="/auth", tags=["auth"])

    return api_router
