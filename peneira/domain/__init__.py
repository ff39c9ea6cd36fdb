"""API pública do domínio da biblioteca Peneira.

O módulo centraliza entidades, portas e erros para que possam ser
importados diretamente de ``peneira.domain``.
"""

from .entities import (
    Converter,
    Field,
    Method,
    MethodKind,
    MethodLike,
    MethodSpec,
    create_converter,
    normalize_methods,
)
from .errors import (
    ConversionError,
    ElementNotFoundError,
    InvalidSelectorError,
    PeneiraError,
    RetrievalError,
)
from .ports import Document, DocumentFetcher, QueryParams

__all__ = [
    "Converter",
    "Field",
    "Method",
    "MethodKind",
    "MethodLike",
    "MethodSpec",
    "create_converter",
    "normalize_methods",
    "ConversionError",
    "ElementNotFoundError",
    "InvalidSelectorError",
    "PeneiraError",
    "RetrievalError",
    "Document",
    "DocumentFetcher",
    "QueryParams",
]
