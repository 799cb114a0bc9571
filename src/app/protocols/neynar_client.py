"""Protocolo do cliente da API Neynar.

Evita dependência direta do app na camada api/connectors e
permite fakes nos testes.
"""

from __future__ import annotations

from typing import Any, Protocol


class NeynarClientProtocol(Protocol):
    """Contrato mínimo para o cliente Neynar (uma requisição por chamada)."""

    async def fetch_conversation(
        self,
        cast_hash: str,
        viewer_fid: int,
        reply_depth: int,
        limit: int,
    ) -> dict[str, Any]: ...

    async def post_cast(
        self,
        text: str,
        signer_uuid: str,
        parent_author_fid: int,
        parent_cast_hash: str,
    ) -> dict[str, Any]: ...

    async def get_signed_key(self) -> dict[str, Any]: ...

    async def lookup_signer(self, signer_uuid: str) -> dict[str, Any]: ...
