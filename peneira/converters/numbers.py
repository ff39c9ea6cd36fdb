"""Leitura permissiva de números a partir do prefixo numérico do texto.

Somente o trecho numérico inicial é considerado (``"42px"`` vira ``42``).
Quando não há prefixo numérico o resultado é ``NOT_A_NUMBER``, nunca uma
exceção.
"""
from __future__ import annotations

import math
import re
from typing import Union

NOT_A_NUMBER = math.nan

_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_FLOAT_PREFIX_RE = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.ASCII,
)


def parse_int_prefix(value: str) -> Union[int, float]:
    match = _INT_PREFIX_RE.match(value)
    if not match:
        return NOT_A_NUMBER
    digits = match.group(1)
    try:
        return int(digits)
    except ValueError:
        # Acima do limite de dígitos do interpretador.
        return float(digits)


def parse_float_prefix(value: str) -> float:
    match = _FLOAT_PREFIX_RE.match(value)
    if not match:
        return NOT_A_NUMBER
    return float(match.group(1))


def is_not_a_number(value: object) -> bool:
    """Indica se ``value`` é o sentinela devolvido para entradas não numéricas."""

    return isinstance(value, float) and math.isnan(value)


__all__ = ["NOT_A_NUMBER", "is_not_a_number", "parse_float_prefix", "parse_int_prefix"]
