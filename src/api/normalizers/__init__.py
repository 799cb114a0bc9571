"""Normalizers: conversão de payloads externos para modelos internos.

Estrutura:
- neynar/: conversa Farcaster (cast + direct_replies) → livestream
"""

from .neynar import normalize_conversation

__all__ = [
    "normalize_conversation",
]
