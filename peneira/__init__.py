"""Peneira - extração de valores tipados a partir de páginas HTML."""
from .application import Crawler
from .converters import (
    ConverterKind,
    converter_for,
    custom,
    optional,
    regexp,
    slug,
    source,
    types,
)
from .domain import (
    ConversionError,
    Converter,
    ElementNotFoundError,
    Field,
    InvalidSelectorError,
    Method,
    MethodKind,
    PeneiraError,
    RetrievalError,
    create_converter,
)

__all__ = [
    "Crawler",
    "ConverterKind",
    "converter_for",
    "custom",
    "optional",
    "regexp",
    "slug",
    "source",
    "types",
    "Converter",
    "Field",
    "Method",
    "MethodKind",
    "create_converter",
    "ConversionError",
    "ElementNotFoundError",
    "InvalidSelectorError",
    "PeneiraError",
    "RetrievalError",
]
