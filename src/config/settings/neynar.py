"""Settings específicas da API Neynar (Farcaster).

Credenciais, host e timeout do cliente HTTP externo.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da API
NEYNAR_API_BASE_URL: str = "https://api.neynar.com"
NEYNAR_API_VERSION: str = "v2"
NEYNAR_API_KEY_HEADER: str = "api_key"
DEFAULT_SIGNED_KEY_TTL_SECONDS: int = 24 * 60 * 60


@dataclass(frozen=True)
class NeynarSettings:
    """Configurações do cliente Neynar.

    Attributes:
        api_key: Chave da API (header definido em api_key_header)
        signer_uuid: Signer usado para publicar casts em nome do app
        api_base_url: Host base da API
        api_version: Versão da API (ex: v2)
        api_key_header: Nome do header que carrega a chave
        request_timeout_seconds: Timeout fixo por requisição
        app_fid: FID do app que assina os SignedKeyRequests
        app_mnemonic: Mnemonic da custody address do app
        signed_key_ttl_seconds: Validade do SignedKeyRequest
    """

    # Credenciais
    api_key: str = ""
    signer_uuid: str = ""

    # API
    api_base_url: str = NEYNAR_API_BASE_URL
    api_version: str = NEYNAR_API_VERSION
    api_key_header: str = NEYNAR_API_KEY_HEADER

    # Timeout (sem retries)
    request_timeout_seconds: float = 10.0

    # Registro de signed keys (/api/auth/login)
    app_fid: int = 0
    app_mnemonic: str = ""
    signed_key_ttl_seconds: int = DEFAULT_SIGNED_KEY_TTL_SECONDS

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com versão."""
        return f"{self.api_base_url.rstrip('/')}/{self.api_version}/farcaster"

    def validate(self) -> list[str]:
        """Valida configurações mínimas da Neynar.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.api_key:
            errors.append("NEYNAR_API_KEY não configurado")

        if not self.signer_uuid:
            errors.append("ANKYSYNC_SIGNER_UUID não configurado")

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("NEYNAR_API_BASE_URL deve começar com http:// ou https://")

        if not self.api_key_header:
            errors.append("NEYNAR_API_KEY_HEADER não pode ser vazio")

        if self.request_timeout_seconds <= 0:
            errors.append("NEYNAR_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.app_fid <= 0:
            errors.append("FARCASTER_DEVELOPER_FID não configurado")

        if not self.app_mnemonic:
            errors.append("FARCASTER_DEVELOPER_MNEMONIC não configurado")

        if self.signed_key_ttl_seconds <= 0:
            errors.append("NEYNAR_SIGNED_KEY_TTL_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> NeynarSettings:
    """Carrega NeynarSettings a partir de variáveis de ambiente."""
    return NeynarSettings(
        api_key=os.getenv("NEYNAR_API_KEY", ""),
        signer_uuid=os.getenv("ANKYSYNC_SIGNER_UUID", ""),
        api_base_url=os.getenv("NEYNAR_API_BASE_URL", NEYNAR_API_BASE_URL),
        api_version=os.getenv("NEYNAR_API_VERSION", NEYNAR_API_VERSION),
        api_key_header=os.getenv("NEYNAR_API_KEY_HEADER", NEYNAR_API_KEY_HEADER),
        request_timeout_seconds=float(os.getenv("NEYNAR_REQUEST_TIMEOUT_SECONDS", "10")),
        app_fid=int(os.getenv("FARCASTER_DEVELOPER_FID", "0")),
        app_mnemonic=os.getenv("FARCASTER_DEVELOPER_MNEMONIC", ""),
        signed_key_ttl_seconds=int(
            os.getenv("NEYNAR_SIGNED_KEY_TTL_SECONDS", str(DEFAULT_SIGNED_KEY_TTL_SECONDS))
        ),
    )


@lru_cache(maxsize=1)
def get_neynar_settings() -> NeynarSettings:
    """Retorna instância cacheada de NeynarSettings."""
    return _load_from_env()
