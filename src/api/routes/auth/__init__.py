"""Rotas de autenticação (signer)."""

from api.routes.auth.router import router

__all__ = ["router"]
