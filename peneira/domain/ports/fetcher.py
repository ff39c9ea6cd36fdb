"""Porta responsável por obter o HTML bruto de uma página."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence, Union

QueryParams = Mapping[str, Union[str, Sequence[str]]]


class DocumentFetcher(ABC):
    """Define como a aplicação obtém a marcação de uma URL."""

    @abstractmethod
    def fetch(
        self, url: str, query: Optional[QueryParams] = None, **options: Any
    ) -> str:
        """Buscar ``url`` e retornar o corpo da resposta como texto."""
