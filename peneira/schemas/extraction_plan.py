"""Modelos Pydantic para planos de extração lidos de arquivos JSON."""
from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, field_validator

from peneira.converters import converter_for, regexp
from peneira.converters import slug as slug_converter
from peneira.domain import Converter, Method
from peneira.domain import Field as ExtractionField


class FieldPayload(BaseModel):
    """Descrição textual de um campo do plano de extração."""

    #: Expressão CSS que localiza o elemento do campo.
    query: str
    #: Nome do conversor no registro (``int``, ``int?``, ``source``...).
    type: str = "str"
    #: Método ou lista ordenada de métodos (``text``, ``:href``, ``.src``...).
    method: str | list[str] | None = None
    #: Coleta todos os elementos em vez de apenas o primeiro.
    many: bool = False
    #: Usa ``None`` quando o elemento não existe.
    optional: bool = False
    #: Expressão regular aplicada antes do conversor.
    pattern: str | None = None
    #: Intervalo inclusivo ``[início, fim]`` de segmentos de caminho.
    slug: list[int] | None = None

    @field_validator("type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        try:
            converter_for(value)
        except KeyError as exc:
            raise ValueError(f"conversor desconhecido: {value}") from exc
        return value

    @field_validator("method")
    @classmethod
    def _valid_method(cls, value: str | list[str] | None) -> str | list[str] | None:
        if value is None:
            return None
        for item in [value] if isinstance(value, str) else value:
            Method.parse(item)
        if isinstance(value, list) and not value:
            raise ValueError("lista de métodos vazia")
        return value

    @field_validator("slug")
    @classmethod
    def _valid_slug(cls, value: list[int] | None) -> list[int] | None:
        if value is not None and not 1 <= len(value) <= 2:
            raise ValueError("slug aceita [início] ou [início, fim]")
        return value

    @field_validator("pattern")
    @classmethod
    def _valid_pattern(cls, value: str | None) -> str | None:
        if value is not None:
            try:
                re.compile(value)
            except re.error as exc:
                raise ValueError(f"expressão regular inválida: {exc}") from exc
        return value

    def build_converter(self) -> Converter[Any]:
        """Monta o conversor descrito por ``type``, ``slug`` e ``pattern``."""

        if self.slug is not None:
            converter: Converter[Any] = slug_converter(*self.slug)
        else:
            converter = converter_for(self.type)
        if self.pattern:
            converter = regexp(self.pattern, converter)
        return converter

    def to_domain(self) -> ExtractionField:
        return ExtractionField(
            query=self.query,
            converter=self.build_converter(),
            method=self.method,
            many=self.many,
            optional=self.optional,
        )


class ExtractionPlanPayload(BaseModel):
    """Plano completo: campos e, opcionalmente, o seletor de itens."""

    #: Seletor dos itens repetidos; sem ele o plano gera um único registro.
    items: str | None = None
    fields: dict[str, FieldPayload]

    @field_validator("fields")
    @classmethod
    def _not_empty(cls, value: dict[str, FieldPayload]) -> dict[str, FieldPayload]:
        if not value:
            raise ValueError("o plano precisa de ao menos um campo")
        return value

    def to_domain(self) -> dict[str, ExtractionField]:
        """Converte os campos validados em entidades de domínio ``Field``."""

        return {name: payload.to_domain() for name, payload in self.fields.items()}


__all__ = ["ExtractionPlanPayload", "FieldPayload"]
