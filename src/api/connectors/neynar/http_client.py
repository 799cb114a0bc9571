"""Cliente HTTP especializado para a API Neynar (Farcaster).

Estende HttpClient genérico com:
- Header de API key (nome configurável) em toda requisição
- Endpoints de conversa, cast e signer
- Registro de signed key assinado com a conta do app (EIP-712)
- Logging estruturado sem api_key e sem texto de casts
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import TYPE_CHECKING, Any

from api.connectors.http_base import HttpClient, HttpClientConfig
from api.connectors.neynar.signed_key import (
    derive_app_account,
    sign_key_request,
    signed_key_deadline,
)
from api.normalizers.neynar.extractor import get_string
from config.settings.neynar import DEFAULT_SIGNED_KEY_TTL_SECONDS
from utils.errors import ShapeInvalidError, SignerConfigError

if TYPE_CHECKING:
    import httpx

    from config.settings import NeynarSettings

logger: logging.Logger = logging.getLogger(__name__)


class NeynarHttpClient(HttpClient):
    """Cliente para os endpoints Neynar usados pelo backend.

    Cada método devolve o JSON bruto da última resposta. Erros propagam
    como TransportError, DecodeError ou UpstreamStatusError.
    """

    def __init__(
        self,
        api_endpoint: str,
        api_key: str,
        api_key_header: str = "api_key",
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        app_fid: int = 0,
        app_mnemonic: str = "",
        signed_key_ttl_seconds: int = DEFAULT_SIGNED_KEY_TTL_SECONDS,
    ) -> None:
        """Inicializa cliente Neynar.

        Args:
            api_endpoint: URL base com versão (ex: https://api.neynar.com/v2/farcaster)
            api_key: Chave da API
            api_key_header: Header que carrega a chave
            config: Configuração HTTP base (timeout). Não é alterada.
            transport: Transport httpx alternativo (testes)
            app_fid: FID do app que assina os SignedKeyRequests
            app_mnemonic: Mnemonic da custody address do app
            signed_key_ttl_seconds: Validade do SignedKeyRequest
        """
        base_config = config or HttpClientConfig()
        super().__init__(
            replace(
                base_config,
                default_headers={
                    **base_config.default_headers,
                    "accept": "application/json",
                    api_key_header: api_key,
                },
            ),
            transport=transport,
        )
        self._api_endpoint = api_endpoint.rstrip("/")
        self._app_fid = app_fid
        self._app_mnemonic = app_mnemonic
        self._signed_key_ttl_seconds = signed_key_ttl_seconds

    async def fetch_conversation(
        self,
        cast_hash: str,
        viewer_fid: int,
        reply_depth: int,
        limit: int,
    ) -> dict[str, Any]:
        """Busca a conversa (cast + replies diretas) de um cast."""
        params = {
            "identifier": cast_hash,
            "type": "hash",
            "reply_depth": reply_depth,
            "include_chronological_parent_casts": "false",
            "viewer_fid": viewer_fid,
            "limit": limit,
        }
        return await self._call("GET", "/cast/conversation", params=params)

    async def post_cast(
        self,
        text: str,
        signer_uuid: str,
        parent_author_fid: int,
        parent_cast_hash: str,
    ) -> dict[str, Any]:
        """Publica um cast como reply do cast pai."""
        payload = {
            "signer_uuid": signer_uuid,
            "text": text,
            "parent_author_fid": parent_author_fid,
            "parent": parent_cast_hash,
        }
        return await self._call("POST", "/cast", payload=payload)

    async def get_signed_key(self) -> dict[str, Any]:
        """Cria um signer e registra a signed key assinada pelo app.

        1. POST /signer gera o par de chaves (status ``generated``)
        2. O app assina o SignedKeyRequest com a public key do signer
        3. POST /signer/signed_key devolve o signer em ``pending_approval``
           com ``signer_approval_url``

        Raises:
            SignerConfigError: FID ou mnemonic do app ausentes/inválidos
                (nenhuma requisição é feita).
            ShapeInvalidError: resposta de criação sem signer_uuid/public_key.
        """
        if self._app_fid <= 0:
            raise SignerConfigError("FARCASTER_DEVELOPER_FID não configurado")
        account = derive_app_account(self._app_mnemonic)

        created = await self._call("POST", "/signer")
        signer_uuid, has_uuid = get_string(created, "signer_uuid")
        public_key, has_key = get_string(created, "public_key")
        if not (has_uuid and has_key):
            raise ShapeInvalidError("Signer criado sem signer_uuid ou public_key")

        deadline = signed_key_deadline(self._signed_key_ttl_seconds)
        try:
            signature = sign_key_request(account, self._app_fid, public_key, deadline)
        except ValueError as exc:
            raise ShapeInvalidError("public_key do signer não é hex") from exc

        payload = {
            "signer_uuid": signer_uuid,
            "app_fid": self._app_fid,
            "deadline": deadline,
            "signature": signature,
        }
        return await self._call("POST", "/signer/signed_key", payload=payload)

    async def lookup_signer(self, signer_uuid: str) -> dict[str, Any]:
        """Consulta status de um signer."""
        return await self._call("GET", "/signer", params={"signer_uuid": signer_uuid})

    async def _call(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = f"{self._api_endpoint}{path}"
        started_at = time.perf_counter()
        if method == "GET":
            data = await self.get_json(url, params=params)
        else:
            data = await self.post_json(url, json=payload)
        logger.debug(
            "neynar_request_ok",
            extra={
                "method": method,
                "endpoint": path,
                "latency_ms": round((time.perf_counter() - started_at) * 1000, 2),
            },
        )
        return data


def create_neynar_http_client(
    settings: NeynarSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> NeynarHttpClient:
    """Factory para criar cliente Neynar a partir das settings.

    Args:
        settings: NeynarSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo (testes).

    Returns:
        Cliente HTTP configurado para Neynar.
    """
    from config.settings import get_neynar_settings

    neynar = settings or get_neynar_settings()
    config = HttpClientConfig(timeout_seconds=neynar.request_timeout_seconds)
    return NeynarHttpClient(
        api_endpoint=neynar.api_endpoint,
        api_key=neynar.api_key,
        api_key_header=neynar.api_key_header,
        config=config,
        transport=transport,
        app_fid=neynar.app_fid,
        app_mnemonic=neynar.app_mnemonic,
        signed_key_ttl_seconds=neynar.signed_key_ttl_seconds,
    )
