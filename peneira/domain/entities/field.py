"""Entidade que descreve um campo de um registro extraído da página."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .converter import Converter
from .method import MethodSpec


@dataclass(frozen=True)
class Field:
    """Configura como um campo nomeado é localizado e convertido."""

    #: Expressão CSS aplicada para encontrar o elemento do campo.
    query: str
    #: Conversor aplicado ao texto lido; usa o conversor de texto quando ausente.
    converter: Optional[Converter[Any]] = None
    #: Método(s) que substituem os métodos padrão do conversor.
    method: Optional[MethodSpec] = None
    #: Quando verdadeiro, coleta o valor de todos os elementos encontrados.
    many: bool = False
    #: Quando verdadeiro, a ausência do elemento resulta em ``None``.
    optional: bool = False
