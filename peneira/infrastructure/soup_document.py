"""Implementação do documento consultável baseada em BeautifulSoup."""
from __future__ import annotations

import logging
import re
from typing import Any, List, Optional, Union

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from peneira.domain import Document, InvalidSelectorError
from peneira.settings import get_html_parser

_CAMEL_BOUNDARY_RE = re.compile(r"([A-Z])")


def normalize_selector_query(query: str) -> str:
    """Corrige seletores com colchetes e aspas ausentes.

    Usado por ``SoupDocument.select`` quando o soupsieve rejeita a consulta,
    como em ``meta[property='article:published_time'`` (colchete sem
    fechamento), antes de uma única nova tentativa.
    """

    result: list[str] = []
    bracket_balance = 0
    quote_char: str | None = None

    for char in query:
        if char in ("'", '"'):
            if quote_char is None:
                quote_char = char
            elif quote_char == char:
                quote_char = None

        if char == "[" and quote_char is None:
            bracket_balance += 1
        elif char == "]":
            if quote_char is not None:
                # Fecha aspas antes de fechar o colchete.
                result.append(quote_char)
                quote_char = None
            if bracket_balance > 0:
                bracket_balance -= 1

        result.append(char)

    if quote_char is not None:
        result.append(quote_char)

    if bracket_balance > 0:
        result.extend("]" * bracket_balance)

    return "".join(result)


def data_attribute_name(name: str) -> str:
    """Nome do atributo ``data-*``; ``camelCase`` vira ``kebab-case``."""

    kebab = _CAMEL_BOUNDARY_RE.sub(lambda match: "-" + match.group(1).lower(), name)
    return f"data-{kebab}"


class SoupDocument(Document):
    """Documento HTML interpretado pelo BeautifulSoup e consultado via soupsieve."""

    def __init__(
        self, markup: Union[str, bytes, BeautifulSoup], parser: Optional[str] = None
    ) -> None:
        if isinstance(markup, BeautifulSoup):
            self._soup = markup
        else:
            self._soup = BeautifulSoup(markup, parser or get_html_parser())
        self._log = logging.getLogger("peneira.document")

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    def select(self, query: str, within: Any = None) -> List[Tag]:
        root = self._soup if within is None else within
        try:
            return list(root.select(query))
        except SelectorSyntaxError as exc:
            normalized_query = normalize_selector_query(query)
            if normalized_query == query:
                raise InvalidSelectorError(f"Selector '{query}' inválido: {exc}") from exc
            self._log.debug(
                "ajustando seletor malformado '%s' para '%s'", query, normalized_query
            )
            try:
                return list(root.select(normalized_query))
            except SelectorSyntaxError as exc2:
                raise InvalidSelectorError(
                    f"Selector '{query}' inválido: {exc2}"
                ) from exc2

    def is_element(self, value: Any) -> bool:
        return isinstance(value, Tag)

    def text(self, element: Tag) -> str:
        return element.get_text()

    def inner_html(self, element: Tag) -> str:
        return element.decode_contents()

    def attribute(self, element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if value is None:
            return None
        # Atributos multivalorados (``class``, ``rel``) chegam como lista.
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def data(self, element: Tag, name: str) -> Optional[str]:
        return self.attribute(element, data_attribute_name(name))


__all__ = ["SoupDocument", "data_attribute_name", "normalize_selector_query"]
