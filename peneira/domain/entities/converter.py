"""Descritor que associa uma transformação de texto a métodos de leitura."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

from .method import Method, MethodSpec, normalize_methods

T = TypeVar("T")


@dataclass(frozen=True)
class Converter(Generic[T]):
    """Transforma o texto bruto de um elemento em um valor tipado.

    A transformação deve ser pura e determinística. ``default_methods`` define
    a ordem de facetas tentada quando o chamador não informa um método.
    """

    #: Função que recebe o texto já aparado e devolve o valor convertido.
    transform: Callable[[str], T]
    #: Métodos tentados, em ordem, quando nenhum método é informado.
    default_methods: Tuple[Method, ...] = (Method.text(),)
    #: Rótulo usado em logs e mensagens.
    name: Optional[str] = None

    def __post_init__(self) -> None:
        # Aceita grafias textuais e guarda apenas a forma canônica.
        object.__setattr__(
            self, "default_methods", normalize_methods(self.default_methods)
        )

    def __call__(self, raw: str) -> T:
        return self.transform(raw)


def create_converter(
    transform: Callable[[str], T],
    method: MethodSpec = "text",
    *,
    name: Optional[str] = None,
) -> Converter[T]:
    """Cria um conversor a partir de uma função e do(s) método(s) padrão."""

    return Converter(transform, normalize_methods(method), name)


__all__ = ["Converter", "create_converter"]
