"""Use case: livestream presente (cast fixo + replies diretas)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.normalizers.neynar import normalize_conversation
from app.domain.livestream import PresentLivestream

if TYPE_CHECKING:
    from app.protocols.neynar_client import NeynarClientProtocol
    from config.settings import LivestreamSettings

logger = logging.getLogger(__name__)


class GetPresentLivestreamUseCase:
    """Busca a conversa do cast configurado e normaliza para o frontend."""

    def __init__(
        self,
        client: NeynarClientProtocol,
        settings: LivestreamSettings,
    ) -> None:
        self._client = client
        self._settings = settings

    async def execute(self) -> PresentLivestream:
        """Executa busca + normalização.

        Raises:
            VibraError: falha de transporte, decode ou shape (propagada).
        """
        raw = await self._client.fetch_conversation(
            cast_hash=self._settings.present_cast_hash,
            viewer_fid=self._settings.viewer_fid,
            reply_depth=self._settings.reply_depth,
            limit=self._settings.conversation_limit,
        )
        record, replies = normalize_conversation(raw)
        logger.info(
            "present_livestream_normalized",
            extra={"cast_hash": record.cast_hash, "replies_count": len(replies)},
        )
        return PresentLivestream(livestream_data=record, replies_to_livestream=replies)
