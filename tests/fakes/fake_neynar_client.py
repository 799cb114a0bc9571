"""Fake in-memory do cliente Neynar para testes deterministas."""

from __future__ import annotations

from typing import Any


class FakeNeynarClient:
    """Implementa NeynarClientProtocol sem IO.

    Registra as chamadas em ``calls`` e devolve ``responses[método]``;
    se ``errors[método]`` existir, levanta a exceção.
    """

    def __init__(
        self,
        responses: dict[str, dict[str, Any]] | None = None,
        errors: dict[str, Exception] | None = None,
    ) -> None:
        self.responses = responses or {}
        self.errors = errors or {}
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def fetch_conversation(
        self,
        cast_hash: str,
        viewer_fid: int,
        reply_depth: int,
        limit: int,
    ) -> dict[str, Any]:
        return self._respond(
            "fetch_conversation",
            cast_hash=cast_hash,
            viewer_fid=viewer_fid,
            reply_depth=reply_depth,
            limit=limit,
        )

    async def post_cast(
        self,
        text: str,
        signer_uuid: str,
        parent_author_fid: int,
        parent_cast_hash: str,
    ) -> dict[str, Any]:
        return self._respond(
            "post_cast",
            text=text,
            signer_uuid=signer_uuid,
            parent_author_fid=parent_author_fid,
            parent_cast_hash=parent_cast_hash,
        )

    async def get_signed_key(self) -> dict[str, Any]:
        return self._respond("get_signed_key")

    async def lookup_signer(self, signer_uuid: str) -> dict[str, Any]:
        return self._respond("lookup_signer", signer_uuid=signer_uuid)

    def _respond(self, method: str, **kwargs: Any) -> dict[str, Any]:
        self.calls.append((method, kwargs))
        if method in self.errors:
            raise self.errors[method]
        return self.responses.get(method, {})
