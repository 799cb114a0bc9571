"""Conector Neynar: cliente HTTP da API Farcaster."""

from api.connectors.neynar.http_client import NeynarHttpClient, create_neynar_http_client

__all__ = ["NeynarHttpClient", "create_neynar_http_client"]
