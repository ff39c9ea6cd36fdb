"""Entidade que descreve qual faceta de um elemento deve ser lida."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union


class MethodKind(str, Enum):
    """Facetas textuais disponíveis em um elemento HTML."""

    TEXT = "text"
    HTML = "html"
    ATTRIBUTE = "attr"
    DATA = "data"


_NAMED_KINDS = (MethodKind.ATTRIBUTE, MethodKind.DATA)


@dataclass(frozen=True)
class Method:
    """Instrução de leitura aplicada a um elemento durante a extração."""

    #: Faceta que será lida do elemento.
    kind: MethodKind
    #: Nome do atributo ou do ``data-*``; ausente para texto e HTML.
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind in _NAMED_KINDS and not self.name:
            raise ValueError(f"method '{self.kind.value}' requires a name")
        if self.kind not in _NAMED_KINDS and self.name is not None:
            raise ValueError(f"method '{self.kind.value}' does not take a name")

    @classmethod
    def text(cls) -> "Method":
        return cls(MethodKind.TEXT)

    @classmethod
    def html(cls) -> "Method":
        return cls(MethodKind.HTML)

    @classmethod
    def attribute(cls, name: str) -> "Method":
        return cls(MethodKind.ATTRIBUTE, name)

    @classmethod
    def data(cls, name: str) -> "Method":
        return cls(MethodKind.DATA, name)

    @classmethod
    def parse(cls, value: Union["Method", str]) -> "Method":
        """Converte a grafia textual de um método em sua forma canônica.

        Aceita ``text``, ``html``, ``attr-<nome>``, ``data-<nome>`` e os
        atalhos ``:<nome>`` (atributo) e ``.<nome>`` (``data-*``).
        """

        if isinstance(value, Method):
            return value
        if not isinstance(value, str):
            raise TypeError(f"unsupported method value: {value!r}")

        raw = value.strip()
        if raw.startswith(":"):
            return cls.attribute(raw[1:])
        if raw.startswith("."):
            return cls.data(raw[1:])
        if raw == MethodKind.TEXT.value:
            return cls.text()
        if raw == MethodKind.HTML.value:
            return cls.html()

        prefix, _, name = raw.partition("-")
        if prefix == MethodKind.ATTRIBUTE.value and name:
            return cls.attribute(name)
        if prefix == MethodKind.DATA.value and name:
            return cls.data(name)
        raise ValueError(f"unknown method: {value!r}")

    def __str__(self) -> str:
        if self.name is None:
            return self.kind.value
        return f"{self.kind.value}-{self.name}"


MethodLike = Union[Method, str]
MethodSpec = Union[MethodLike, Iterable[MethodLike]]


def normalize_methods(value: MethodSpec) -> Tuple[Method, ...]:
    """Normaliza um método único ou uma lista ordenada de métodos."""

    if isinstance(value, (Method, str)):
        return (Method.parse(value),)
    methods = tuple(Method.parse(item) for item in value)
    if not methods:
        raise ValueError("at least one method is required")
    return methods


__all__ = ["Method", "MethodKind", "MethodLike", "MethodSpec", "normalize_methods"]
