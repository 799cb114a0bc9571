"""Normalizer Neynar: conversa Farcaster para modelos de livestream."""

from .normalizer import (
    normalize_conversation,
    normalize_direct_replies,
    normalize_reply,
    normalize_stream_cast,
)

__all__ = [
    "normalize_conversation",
    "normalize_direct_replies",
    "normalize_reply",
    "normalize_stream_cast",
]
