"""Use cases do livestream (leitura da conversa e publicação de replies)."""

from app.use_cases.livestream.get_present_livestream import GetPresentLivestreamUseCase
from app.use_cases.livestream.write_cast import WriteCastUseCase, parse_cast_text

__all__ = [
    "GetPresentLivestreamUseCase",
    "WriteCastUseCase",
    "parse_cast_text",
]
