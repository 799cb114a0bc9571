"""Agregador de settings do Vibra.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_CORS_ORIGIN,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Livestream settings
from config.settings.livestream import (
    LivestreamSettings,
    get_livestream_settings,
)

# External API settings
from config.settings.neynar import (
    NEYNAR_API_BASE_URL,
    NEYNAR_API_KEY_HEADER,
    NEYNAR_API_VERSION,
    NeynarSettings,
    get_neynar_settings,
)

__all__ = [
    # Constants
    "DEFAULT_CORS_ORIGIN",
    "NEYNAR_API_BASE_URL",
    "NEYNAR_API_KEY_HEADER",
    "NEYNAR_API_VERSION",
    # Base
    "BaseSettings",
    "Environment",
    # Livestream
    "LivestreamSettings",
    # Neynar
    "NeynarSettings",
    "get_base_settings",
    "get_livestream_settings",
    "get_neynar_settings",
]
