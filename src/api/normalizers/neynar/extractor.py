"""Extração tipada de campos opcionais em JSON sem schema.

Cada helper devolve ``(valor, presente)``. Quando a chave falta, ou o
valor tem tipo inesperado, o valor é o zero do tipo e ``presente`` é False.
Caminhos são tuplas de chaves (ex: ``("conversation", "cast")``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

Path = tuple[str, ...] | str


def _as_path(path: Path) -> tuple[str, ...]:
    return (path,) if isinstance(path, str) else path


def get_path(obj: Any, path: Path) -> tuple[Any, bool]:
    """Percorre ``obj`` pelas chaves de ``path``.

    Returns:
        (valor, True) se todas as chaves existirem em mappings,
        (None, False) caso contrário.
    """
    current = obj
    for key in _as_path(path):
        if not isinstance(current, Mapping) or key not in current:
            return None, False
        current = current[key]
    return current, True


def get_string(obj: Any, path: Path) -> tuple[str, bool]:
    """Extrai string; ausente ou não-string vira ``""``."""
    value, present = get_path(obj, path)
    if present and isinstance(value, str):
        return value, True
    return "", False


def get_int(obj: Any, path: Path) -> tuple[int, bool]:
    """Extrai inteiro; aceita float integral, rejeita bool."""
    value, present = get_path(obj, path)
    if not present or isinstance(value, bool):
        return 0, False
    if isinstance(value, int):
        return value, True
    if isinstance(value, float) and value.is_integer():
        return int(value), True
    return 0, False


def get_mapping(obj: Any, path: Path) -> tuple[dict[str, Any], bool]:
    """Extrai objeto JSON; ausente ou não-objeto vira ``{}``."""
    value, present = get_path(obj, path)
    if present and isinstance(value, Mapping):
        return dict(value), True
    return {}, False


def get_list(obj: Any, path: Path) -> tuple[list[Any], bool]:
    """Extrai lista JSON; ausente ou não-lista vira ``[]``."""
    value, present = get_path(obj, path)
    if present and isinstance(value, list):
        return value, True
    return [], False
