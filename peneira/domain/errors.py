"""Hierarquia de erros levantados durante a extração de campos."""
from __future__ import annotations

from typing import Any


class PeneiraError(Exception):
    """Erro base de todas as falhas reportadas pela biblioteca."""


class ElementNotFoundError(PeneiraError, LookupError):
    """Nenhum elemento corresponde ao seletor informado."""

    def __init__(self, selector: Any) -> None:
        super().__init__(f"Element not found for selector: {selector}")
        #: Seletor que não encontrou elementos no documento.
        self.selector = selector


class ConversionError(PeneiraError, ValueError):
    """O conversor não conseguiu produzir um valor a partir do texto."""


class InvalidSelectorError(PeneiraError, ValueError):
    """Consulta CSS inválida mesmo após a tentativa de correção."""


class RetrievalError(PeneiraError, RuntimeError):
    """Falha ao obter o HTML de uma URL."""

    def __init__(self, message: str, *, url: str, response: Any = None) -> None:
        super().__init__(message)
        self.url = url
        #: Resposta HTTP recebida, quando houver, para inspeção pelo chamador.
        self.response = response


__all__ = [
    "ConversionError",
    "ElementNotFoundError",
    "InvalidSelectorError",
    "PeneiraError",
    "RetrievalError",
]
