"""Registro de conversores embutidos e fábricas de conversores compostos.

Cada tipo primitivo é identificado por ``ConverterKind``. A variante
opcional de qualquer conversor é obtida com ``optional``: texto vazio vira
``None`` em vez de ser convertido.

Exemplo::

    from peneira.converters import converter_for, regexp, types

    price = regexp(r"R\\$\\s*([\\d.]+)", types.float)
    views = converter_for("int?")
"""
from __future__ import annotations

import json
import re
from enum import Enum
from types import SimpleNamespace
from typing import Any, Callable, Dict, Optional, TypeVar, Union

from peneira.domain import ConversionError, Converter, Method, create_converter

from .dates import formatted_date, natural_date, parse_date, template_date
from .numbers import NOT_A_NUMBER, is_not_a_number, parse_float_prefix, parse_int_prefix

T = TypeVar("T")


class ConverterKind(str, Enum):
    """Tipos primitivos disponíveis no registro."""

    STR = "str"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    BUFFER = "buffer"
    JSON = "json"
    DATE = "date"


_FALSY_TEXT = frozenset({"false", "0", "null", "undefined"})


def _identity(value: str) -> str:
    return value


def to_bool(value: str) -> bool:
    """Verdadeiro, exceto para vazio e ``false``/``0``/``null``/``undefined``."""

    return bool(value) and value.lower() not in _FALSY_TEXT


def _to_bytes(value: str) -> bytes:
    return value.encode("utf-8")


_TRANSFORMS: Dict[ConverterKind, Callable[[str], Any]] = {
    ConverterKind.STR: _identity,
    ConverterKind.BOOL: to_bool,
    ConverterKind.INT: parse_int_prefix,
    ConverterKind.FLOAT: parse_float_prefix,
    ConverterKind.BUFFER: _to_bytes,
    ConverterKind.JSON: json.loads,
    ConverterKind.DATE: parse_date,
}


def optional(converter: Converter[T]) -> Converter[Optional[T]]:
    """Deriva a variante que devolve ``None`` para texto vazio."""

    inner = converter.transform

    def transform(value: str) -> Optional[T]:
        if value == "":
            return None
        return inner(value)

    name = f"{converter.name}?" if converter.name else None
    return Converter(transform, converter.default_methods, name)


def regexp(pattern: Union[str, re.Pattern[str]], inner: Converter[T]) -> Converter[T]:
    """Aplica ``pattern`` ao texto e converte o trecho capturado com ``inner``.

    O primeiro grupo de captura é usado quando existe; caso contrário, o
    trecho casado inteiro.
    """

    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def transform(value: str) -> T:
        match = compiled.search(value)
        if match is None:
            raise ConversionError(f"No match found for pattern: {compiled.pattern}")
        captured = match.group(1) if compiled.groups else None
        return inner.transform(match.group(0) if captured is None else captured)

    return create_converter(transform, "text", name=f"regexp({compiled.pattern})")


def slug(start: int, end: Optional[int] = None) -> Converter[str]:
    """Recorta segmentos de um caminho separado por ``/``.

    Segmentos vazios são descartados e ``end`` é inclusivo: ``slug(1, 1)``
    em ``/anime/one-piece/ep-1000`` resulta em ``one-piece``.
    """

    stop = None if end is None else end + 1

    def transform(value: str) -> str:
        segments = [segment for segment in value.split("/") if segment]
        return "/".join(segments[start:stop])

    return create_converter(transform, ":href", name=f"slug({start}, {end})")


custom = create_converter

_REQUIRED: Dict[ConverterKind, Converter[Any]] = {
    kind: create_converter(transform, "text", name=kind.value)
    for kind, transform in _TRANSFORMS.items()
}
_OPTIONAL: Dict[ConverterKind, Converter[Any]] = {
    kind: optional(converter) for kind, converter in _REQUIRED.items()
}

#: Texto de elementos de mídia, priorizando ``data-src`` (carregamento tardio).
source: Converter[str] = create_converter(
    _identity, [Method.data("src"), Method.attribute("src")], name="source"
)


def converter_for(
    kind: Union[ConverterKind, str], nullable: bool = False
) -> Converter[Any]:
    """Busca um conversor do registro.

    Aceita ``ConverterKind`` ou o nome textual; o sufixo ``?`` (``"int?"``)
    equivale a ``nullable=True``. ``"source"`` também é reconhecido.
    """

    if not isinstance(kind, ConverterKind):
        name = str(kind)
        if name.endswith("?"):
            name, nullable = name[:-1], True
        if name == "source":
            return optional(source) if nullable else source
        try:
            kind = ConverterKind(name)
        except ValueError:
            raise KeyError(f"unknown converter: {kind!r}") from None
    registry = _OPTIONAL if nullable else _REQUIRED
    return registry[kind]


types = SimpleNamespace(
    **{kind.value: converter for kind, converter in _REQUIRED.items()},
    **{f"optional_{kind.value}": converter for kind, converter in _OPTIONAL.items()},
    source=source,
    regexp=regexp,
    slug=slug,
    custom=custom,
    optional=optional,
)


__all__ = [
    "ConverterKind",
    "NOT_A_NUMBER",
    "converter_for",
    "custom",
    "formatted_date",
    "is_not_a_number",
    "natural_date",
    "optional",
    "parse_date",
    "regexp",
    "slug",
    "source",
    "template_date",
    "to_bool",
    "types",
]
