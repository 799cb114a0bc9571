"""Protocolos (contratos) usados pelo app.

Implementações concretas vivem em api/connectors; o app só conhece
estes contratos.
"""

from app.protocols.neynar_client import NeynarClientProtocol

__all__ = ["NeynarClientProtocol"]
