"""Rotas de liveness."""

from api.routes.health.router import HELLO_MESSAGE, router

__all__ = ["HELLO_MESSAGE", "router"]
