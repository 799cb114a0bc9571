"""Rotas do livestream."""

from api.routes.livestream.router import router

__all__ = ["router"]
