"""Connectors: adapters de borda para APIs externas.

Estrutura:
- http_base.py: cliente HTTP genérico (httpx, timeout, sem retries)
- neynar/: API Neynar (Farcaster)
"""

__all__: list[str] = []
