"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    BadRequestError,
    DecodeError,
    NoEmbedsError,
    ShapeInvalidError,
    SignerConfigError,
    TransportError,
    UpstreamStatusError,
    VibraError,
)

__all__ = [
    "BadRequestError",
    "DecodeError",
    "NoEmbedsError",
    "ShapeInvalidError",
    "SignerConfigError",
    "TransportError",
    "UpstreamStatusError",
    "VibraError",
]
