"""Entidades de domínio utilizadas na extração de campos."""
from .converter import Converter, create_converter
from .field import Field
from .method import Method, MethodKind, MethodLike, MethodSpec, normalize_methods

__all__ = [
    "Converter",
    "Field",
    "Method",
    "MethodKind",
    "MethodLike",
    "MethodSpec",
    "create_converter",
    "normalize_methods",
]
