"""Porta que expõe consultas sobre um documento HTML já interpretado."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class Document(ABC):
    """Define as operações de leitura usadas pelo motor de extração.

    Os elementos retornados são opacos para o domínio; apenas a própria
    implementação sabe interpretá-los.
    """

    @abstractmethod
    def select(self, query: str, within: Any = None) -> List[Any]:
        """Retornar, em ordem de documento, os elementos que casam com ``query``.

        Quando ``within`` é informado a busca fica restrita aos descendentes
        desse elemento.
        """

    @abstractmethod
    def is_element(self, value: Any) -> bool:
        """Indicar se ``value`` é um elemento deste documento."""

    @abstractmethod
    def text(self, element: Any) -> str:
        """Texto renderizado do elemento."""

    @abstractmethod
    def inner_html(self, element: Any) -> str:
        """Marcação interna serializada do elemento."""

    @abstractmethod
    def attribute(self, element: Any, name: str) -> Optional[str]:
        """Valor do atributo ``name`` ou ``None`` quando ausente."""

    @abstractmethod
    def data(self, element: Any, name: str) -> Optional[str]:
        """Valor do atributo ``data-<name>`` ou ``None`` quando ausente."""
