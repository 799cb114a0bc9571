"""Testes do cliente HTTP base (httpx, sem retries)."""

from __future__ import annotations

import httpx
import pytest

from api.connectors.http_base import HttpClient, HttpClientConfig
from utils.errors import DecodeError, TransportError, UpstreamStatusError


def _client(handler, **config_kwargs) -> HttpClient:
    return HttpClient(
        HttpClientConfig(**config_kwargs),
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_get_json_merges_default_headers_and_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    client = _client(handler, default_headers={"accept": "application/json"})

    data = await client.get_json(
        "https://api.test/items",
        params={"limit": 5},
        headers={"x-extra": "1"},
    )

    assert data == {"ok": True}
    assert seen[0].method == "GET"
    assert seen[0].url.params["limit"] == "5"
    assert seen[0].headers["accept"] == "application/json"
    assert seen[0].headers["x-extra"] == "1"


@pytest.mark.asyncio
async def test_post_json_sends_json_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"created": 1})

    client = _client(handler)

    await client.post_json("https://api.test/items", json={"text": 'quote " here'})

    assert seen[0].method == "POST"
    assert seen[0].headers["content-type"] == "application/json"
    assert b'"quote \\" here"' in seen[0].content


@pytest.mark.asyncio
async def test_invalid_json_raises_decode_error() -> None:
    client = _client(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(DecodeError):
        await client.get_json("https://api.test/items")


@pytest.mark.asyncio
async def test_non_object_json_raises_decode_error() -> None:
    client = _client(lambda request: httpx.Response(200, json=[1, 2, 3]))

    with pytest.raises(DecodeError):
        await client.get_json("https://api.test/items")


@pytest.mark.asyncio
async def test_timeout_raises_transport_error_without_retry() -> None:
    attempts = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal attempts
        attempts += 1
        raise httpx.ReadTimeout("timed out", request=request)

    client = _client(handler)

    with pytest.raises(TransportError):
        await client.get_json("https://api.test/items")
    assert attempts == 1


@pytest.mark.asyncio
async def test_connect_error_raises_transport_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client = _client(handler)

    with pytest.raises(TransportError):
        await client.post_json("https://api.test/items", json={})


@pytest.mark.asyncio
async def test_invalid_url_raises_transport_error_without_calling_transport() -> None:
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={})

    client = _client(handler)

    with pytest.raises(TransportError, match="http_invalid_url"):
        await client.get_json("https://api.test/\x00items")

    assert calls == []


@pytest.mark.asyncio
async def test_error_status_raises_upstream_status_error() -> None:
    client = _client(
        lambda request: httpx.Response(
            401, json={"code": "Unauthorized", "message": "Invalid API key"}
        )
    )

    with pytest.raises(UpstreamStatusError) as exc_info:
        await client.get_json("https://api.test/items")

    assert exc_info.value.status_code == 401
    assert exc_info.value.upstream_message == "Invalid API key"


@pytest.mark.asyncio
async def test_error_status_with_non_json_body() -> None:
    client = _client(lambda request: httpx.Response(502, text="Bad Gateway"))

    with pytest.raises(UpstreamStatusError) as exc_info:
        await client.get_json("https://api.test/items")

    assert exc_info.value.status_code == 502
    assert exc_info.value.upstream_message is None
