"""Exceções de domínio do proxy Vibra.

Camadas superiores (rotas) mapeiam estas exceções para status HTTP:
``BadRequestError`` vira 400, todo o resto vira 500.
"""

from __future__ import annotations


class VibraError(RuntimeError):
    """Base para falhas tratadas pelo serviço."""


class TransportError(VibraError):
    """Falha de rede ou timeout ao chamar a API externa."""


class DecodeError(VibraError):
    """Resposta da API externa não é JSON válido (ou não é objeto)."""


class UpstreamStatusError(VibraError):
    """API externa respondeu com status não-2xx."""

    def __init__(
        self,
        message: str,
        status_code: int,
        upstream_message: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.upstream_message = upstream_message


class ShapeInvalidError(VibraError):
    """Campo obrigatório ausente ou com tipo inesperado no payload."""


class NoEmbedsError(VibraError):
    """Cast principal sem embeds (não há URL de stream)."""


class BadRequestError(VibraError):
    """Request inbound malformado (body ou query param)."""


class SignerConfigError(VibraError):
    """FID ou mnemonic do app ausentes/inválidos para registrar signed keys."""
