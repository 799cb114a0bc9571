"""Cliente HTTP base para conectores da camada API.

Uma requisição por chamada, timeout fixo e sem retries. Falhas
de transporte e de decode viram exceções de utils.errors.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from utils.errors import DecodeError, TransportError, UpstreamStatusError

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpClient:
    """Cliente HTTP simples para chamadas JSON externas.

    ``transport`` permite injetar um ``httpx.MockTransport`` em testes.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    async def get_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """GET e decode do body JSON (objeto)."""
        response = await self._send("GET", url, params=params, headers=headers)
        return _decode_json_object(response)

    async def post_json(
        self,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """POST com body JSON e decode do body de resposta."""
        response = await self._send("POST", url, json=json, headers=headers)
        return _decode_json_object(response)

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(
                verify=self._config.verify_ssl,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    params=params,
                    json=json,
                    headers=merged_headers,
                    timeout=self._config.timeout_seconds,
                )
        except httpx.TimeoutException as exc:
            logger.warning("http_timeout", extra={"method": method, "url": url})
            raise TransportError("http_timeout") from exc
        except httpx.InvalidURL as exc:
            logger.warning("http_invalid_url", extra={"method": method, "url": url})
            raise TransportError("http_invalid_url") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "http_transport_error",
                extra={"method": method, "url": url, "error_type": type(exc).__name__},
            )
            raise TransportError("http_connection_error") from exc

        if response.is_error:
            upstream_message = _extract_error_message(response)
            logger.warning(
                "http_error_status",
                extra={
                    "method": method,
                    "url": url,
                    "status_code": response.status_code,
                    "upstream_message": upstream_message,
                },
            )
            raise UpstreamStatusError(
                f"http_status_{response.status_code}",
                status_code=response.status_code,
                upstream_message=upstream_message,
            )
        return response


def _decode_json_object(response: httpx.Response) -> dict[str, Any]:
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.error("http_invalid_json", extra={"status_code": response.status_code})
        raise DecodeError("Response JSON inválido") from exc
    if not isinstance(data, dict):
        logger.error(
            "http_unexpected_json_type",
            extra={"status_code": response.status_code, "json_type": type(data).__name__},
        )
        raise DecodeError("Response JSON não é objeto")
    return data


def _extract_error_message(response: httpx.Response) -> str | None:
    """Extrai ``message`` do body de erro, se for JSON."""
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None
