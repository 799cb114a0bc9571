"""Use case: publicar reply no cast do livestream."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from utils.errors import BadRequestError

if TYPE_CHECKING:
    from app.protocols.neynar_client import NeynarClientProtocol
    from config.settings import LivestreamSettings

logger = logging.getLogger(__name__)


def parse_cast_text(body: Any) -> str:
    """Valida o body inbound de /api/cast e retorna ``text``.

    Raises:
        BadRequestError: body não é objeto ou ``text`` ausente/não-string.
    """
    if not isinstance(body, dict):
        raise BadRequestError("body deve ser um objeto JSON")
    text = body.get("text")
    if not isinstance(text, str):
        raise BadRequestError("campo text ausente ou inválido")
    return text


class WriteCastUseCase:
    """Publica cast com signer do app como reply ao cast configurado."""

    def __init__(
        self,
        client: NeynarClientProtocol,
        settings: LivestreamSettings,
        signer_uuid: str,
    ) -> None:
        self._client = client
        self._settings = settings
        self._signer_uuid = signer_uuid

    async def execute(self, text: str) -> dict[str, Any]:
        """Envia o cast e devolve a resposta bruta da API."""
        response = await self._client.post_cast(
            text=text,
            signer_uuid=self._signer_uuid,
            parent_author_fid=self._settings.parent_author_fid,
            parent_cast_hash=self._settings.present_cast_hash,
        )
        logger.info("cast_posted", extra={"text_length": len(text)})
        return response
