"""Motor de extração de valores tipados a partir de um documento HTML."""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, TypeVar, Union

from peneira.converters import converter_for, types
from peneira.domain import (
    Converter,
    Document,
    DocumentFetcher,
    ElementNotFoundError,
    Field,
    Method,
    MethodKind,
    MethodSpec,
    QueryParams,
    normalize_methods,
)
from peneira.infrastructure import RequestsFetcher, SoupDocument

T = TypeVar("T")

#: Consulta CSS, elemento, coleção de elementos ou função sobre o documento.
Selector = Union[str, Any, Iterable[Any], Callable[[Document], Iterable[Any]]]


class Crawler:
    """Extrai valores de um único documento, que nunca é alterado.

    Exemplo::

        crawler = Crawler.from_html(html)
        views = crawler.get(".views", Crawler.types.int)
        cover = crawler.get("img.cover", Crawler.types.source)
        links = crawler.get_all("a.episode", Crawler.types.slug(1), ":href")
    """

    types = types
    converter_for = staticmethod(converter_for)

    def __init__(self, document: Document) -> None:
        self._document = document
        self._log = logging.getLogger("peneira.crawler")

    @classmethod
    def from_html(cls, markup: Union[str, bytes], parser: Optional[str] = None) -> "Crawler":
        """Interpreta a marcação e cria um crawler sobre o documento resultante."""

        return cls(SoupDocument(markup, parser))

    @classmethod
    def load(
        cls,
        url: str,
        query: Optional[QueryParams] = None,
        *,
        fetcher: Optional[DocumentFetcher] = None,
        parser: Optional[str] = None,
        **options: Any,
    ) -> "Crawler":
        """Busca ``url`` e cria um crawler sobre o HTML obtido.

        Falhas de rede ou respostas de erro levantam ``RetrievalError``.
        """

        markup = (fetcher or RequestsFetcher()).fetch(url, query, **options)
        return cls.from_html(markup, parser)

    @property
    def document(self) -> Document:
        return self._document

    def get(
        self,
        selector: Selector,
        converter: Optional[Converter[T]] = None,
        method: Optional[MethodSpec] = None,
        *,
        within: Any = None,
    ) -> T:
        """Extrai e converte o valor do primeiro elemento encontrado.

        Os métodos são tentados em ordem e o primeiro texto não vazio é
        usado. Sem nenhum elemento, levanta ``ElementNotFoundError``.
        ``within`` restringe apenas consultas CSS; com outros seletores
        levanta ``TypeError``.
        """

        elements = self._resolve(selector, within)
        if not elements:
            raise ElementNotFoundError(selector)
        return self._convert(elements[0], converter, method)

    def get_all(
        self,
        selector: Selector,
        converter: Optional[Converter[T]] = None,
        method: Optional[MethodSpec] = None,
        *,
        within: Any = None,
    ) -> List[T]:
        """Aplica :meth:`get` a cada elemento encontrado, em ordem de documento.

        Nenhum elemento encontrado resulta em lista vazia.
        """

        elements = self._resolve(selector, within)
        return [self._convert(element, converter, method) for element in elements]

    def extract(self, fields: Mapping[str, Field], *, within: Any = None) -> Dict[str, Any]:
        """Monta um registro com um valor para cada campo informado."""

        record: Dict[str, Any] = {}
        for name, field in fields.items():
            if field.many:
                record[name] = self.get_all(
                    field.query, field.converter, field.method, within=within
                )
                continue
            try:
                record[name] = self.get(
                    field.query, field.converter, field.method, within=within
                )
            except ElementNotFoundError:
                if not field.optional:
                    raise
                self._log.debug("campo '%s' ausente, seguindo sem valor", name)
                record[name] = None
        return record

    def extract_all(
        self, selector: Selector, fields: Mapping[str, Field]
    ) -> List[Dict[str, Any]]:
        """Monta um registro para cada item encontrado por ``selector``.

        As consultas dos campos ficam restritas ao item.
        """

        items = self._resolve(selector, None)
        self._log.debug("%d itens encontrados para '%s'", len(items), selector)
        return [self.extract(fields, within=item) for item in items]

    def _resolve(self, selector: Selector, within: Any) -> List[Any]:
        if isinstance(selector, str):
            return self._document.select(selector, within)
        if within is not None:
            raise TypeError("within só se aplica a seletores CSS em texto")
        # Elementos também são iteráveis e chamáveis; por isso vêm antes.
        if self._document.is_element(selector):
            return [selector]
        if callable(selector):
            return list(selector(self._document))
        if isinstance(selector, Iterable):
            return list(selector)
        raise TypeError(f"unsupported selector: {selector!r}")

    def _convert(
        self,
        element: Any,
        converter: Optional[Converter[T]],
        method: Optional[MethodSpec],
    ) -> T:
        converter = converter or types.str
        methods = (
            normalize_methods(method) if method is not None else converter.default_methods
        )

        text = ""
        for current in methods:
            text = self._read(element, current).strip()
            if text:
                break
            self._log.debug("método '%s' sem texto, tentando o próximo", current)
        return converter.transform(text)

    def _read(self, element: Any, method: Method) -> str:
        if method.kind is MethodKind.TEXT:
            return self._document.text(element)
        if method.kind is MethodKind.HTML:
            return self._document.inner_html(element)
        if method.kind is MethodKind.ATTRIBUTE:
            return self._document.attribute(element, method.name) or ""
        return self._document.data(element, method.name) or ""


__all__ = ["Crawler", "Selector"]
