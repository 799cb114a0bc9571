"""Settings do livestream apresentado pelo frontend.

Identificam o cast fixo do livestream e os parâmetros da conversa.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_PRESENT_CAST_HASH = "0xbd78ba95ff14557be0a50746432df3cac0788758"
DEFAULT_PARENT_AUTHOR_FID = 16098


@dataclass(frozen=True)
class LivestreamSettings:
    """Parâmetros do cast apresentado em /api/present.

    Attributes:
        present_cast_hash: Hash do cast do livestream (também parent das replies)
        parent_author_fid: FID do autor do cast pai usado em /api/cast
        viewer_fid: FID do viewer na busca da conversa
        reply_depth: Profundidade de replies na busca da conversa
        conversation_limit: Limite de replies retornadas
    """

    present_cast_hash: str = DEFAULT_PRESENT_CAST_HASH
    parent_author_fid: int = DEFAULT_PARENT_AUTHOR_FID
    viewer_fid: int = DEFAULT_PARENT_AUTHOR_FID
    reply_depth: int = 2
    conversation_limit: int = 50

    def validate(self) -> list[str]:
        """Valida parâmetros do livestream."""
        errors: list[str] = []

        if not self.present_cast_hash.startswith("0x"):
            errors.append("VIBRA_PRESENT_CAST_HASH deve começar com 0x")

        if self.parent_author_fid <= 0:
            errors.append("VIBRA_PARENT_AUTHOR_FID deve ser > 0")

        if self.reply_depth < 0:
            errors.append("VIBRA_REPLY_DEPTH deve ser >= 0")

        if not 1 <= self.conversation_limit <= 50:
            errors.append("VIBRA_CONVERSATION_LIMIT deve estar entre 1 e 50")

        return errors


def _load_from_env() -> LivestreamSettings:
    """Carrega LivestreamSettings a partir de variáveis de ambiente."""
    return LivestreamSettings(
        present_cast_hash=os.getenv("VIBRA_PRESENT_CAST_HASH", DEFAULT_PRESENT_CAST_HASH),
        parent_author_fid=int(
            os.getenv("VIBRA_PARENT_AUTHOR_FID", str(DEFAULT_PARENT_AUTHOR_FID))
        ),
        viewer_fid=int(os.getenv("VIBRA_VIEWER_FID", str(DEFAULT_PARENT_AUTHOR_FID))),
        reply_depth=int(os.getenv("VIBRA_REPLY_DEPTH", "2")),
        conversation_limit=int(os.getenv("VIBRA_CONVERSATION_LIMIT", "50")),
    )


@lru_cache(maxsize=1)
def get_livestream_settings() -> LivestreamSettings:
    """Retorna instância cacheada de LivestreamSettings."""
    return _load_from_env()
