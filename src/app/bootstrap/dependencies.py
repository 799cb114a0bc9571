"""Composition root: contexto explícito de dependências.

Rotas recebem um AppContext (via app.state) em vez de ler settings
e clientes globais; testes constroem um AppContext com fakes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastapi import Request

from app.use_cases.livestream import GetPresentLivestreamUseCase, WriteCastUseCase
from config.settings import (
    BaseSettings,
    LivestreamSettings,
    NeynarSettings,
    get_base_settings,
    get_livestream_settings,
    get_neynar_settings,
)

if TYPE_CHECKING:
    from app.protocols.neynar_client import NeynarClientProtocol


@dataclass(frozen=True)
class AppContext:
    """Dependências compartilhadas (imutáveis) entre requests."""

    neynar_client: NeynarClientProtocol
    base_settings: BaseSettings
    neynar_settings: NeynarSettings
    livestream_settings: LivestreamSettings

    def present_livestream_use_case(self) -> GetPresentLivestreamUseCase:
        return GetPresentLivestreamUseCase(self.neynar_client, self.livestream_settings)

    def write_cast_use_case(self) -> WriteCastUseCase:
        return WriteCastUseCase(
            self.neynar_client,
            self.livestream_settings,
            signer_uuid=self.neynar_settings.signer_uuid,
        )


def create_app_context(
    neynar_client: NeynarClientProtocol | None = None,
    base_settings: BaseSettings | None = None,
    neynar_settings: NeynarSettings | None = None,
    livestream_settings: LivestreamSettings | None = None,
) -> AppContext:
    """Cria AppContext; argumentos omitidos vêm do ambiente."""
    neynar = neynar_settings or get_neynar_settings()
    if neynar_client is None:
        from api.connectors.neynar import create_neynar_http_client

        neynar_client = create_neynar_http_client(neynar)
    return AppContext(
        neynar_client=neynar_client,
        base_settings=base_settings or get_base_settings(),
        neynar_settings=neynar,
        livestream_settings=livestream_settings or get_livestream_settings(),
    )


def get_app_context(request: Request) -> AppContext:
    """Dependency FastAPI: AppContext registrado em app.state."""
    return request.app.state.context
