"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    LivestreamSettings,
    NeynarSettings,
    get_base_settings,
    get_livestream_settings,
    get_neynar_settings,
)

TEST_MNEMONIC = "test test test test test test test test test test test junk"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_base_settings.cache_clear()
    get_neynar_settings.cache_clear()
    get_livestream_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_neynar_settings.cache_clear()
    get_livestream_settings.cache_clear()


def test_neynar_defaults() -> None:
    settings = NeynarSettings()

    assert settings.api_endpoint == "https://api.neynar.com/v2/farcaster"
    assert settings.api_key_header == "api_key"
    assert settings.request_timeout_seconds == 10.0


def test_neynar_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NEYNAR_API_KEY", "env-key")
    monkeypatch.setenv("ANKYSYNC_SIGNER_UUID", "env-signer")
    monkeypatch.setenv("NEYNAR_API_BASE_URL", "http://localhost:9000/")
    monkeypatch.setenv("NEYNAR_REQUEST_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("FARCASTER_DEVELOPER_FID", "16098")
    monkeypatch.setenv("FARCASTER_DEVELOPER_MNEMONIC", TEST_MNEMONIC)

    settings = get_neynar_settings()

    assert settings.api_key == "env-key"
    assert settings.signer_uuid == "env-signer"
    assert settings.api_endpoint == "http://localhost:9000/v2/farcaster"
    assert settings.request_timeout_seconds == 2.5
    assert settings.app_fid == 16098
    assert settings.signed_key_ttl_seconds == 24 * 60 * 60
    assert settings.validate() == []


def test_neynar_validate_reports_missing_credentials() -> None:
    errors = NeynarSettings(request_timeout_seconds=0).validate()

    assert "NEYNAR_API_KEY não configurado" in errors
    assert "ANKYSYNC_SIGNER_UUID não configurado" in errors
    assert "NEYNAR_REQUEST_TIMEOUT_SECONDS deve ser > 0" in errors
    assert "FARCASTER_DEVELOPER_FID não configurado" in errors
    assert "FARCASTER_DEVELOPER_MNEMONIC não configurado" in errors


def test_livestream_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIBRA_PRESENT_CAST_HASH", "0x1234")
    monkeypatch.setenv("VIBRA_PARENT_AUTHOR_FID", "99")
    monkeypatch.setenv("VIBRA_CONVERSATION_LIMIT", "10")

    settings = get_livestream_settings()

    assert settings.present_cast_hash == "0x1234"
    assert settings.parent_author_fid == 99
    assert settings.viewer_fid == 16098
    assert settings.conversation_limit == 10
    assert settings.validate() == []


def test_livestream_validate_limits() -> None:
    errors = LivestreamSettings(present_cast_hash="abc", conversation_limit=500).validate()

    assert len(errors) == 2


def test_base_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("CORS_ALLOWED_ORIGIN", "https://vibra.example")

    settings = get_base_settings()

    assert settings.environment == "production"
    assert settings.cors_allowed_origin == "https://vibra.example"
    assert settings.validate() == []


def test_base_settings_rejects_bad_port() -> None:
    assert BaseSettings(port=0).validate() == ["PORT inválida: 0"]
