"""Conversores de datas.

``parse_date`` é a transformação do conversor ``date`` do registro. As
fábricas ``natural_date``, ``formatted_date`` e ``template_date`` criam
conversores que delegam para interpretadores de data específicos.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Optional

from dateutil import parser as dateutil_parser

from peneira.domain import ConversionError, Converter, create_converter

_TEMPLATE_TOKEN_RE = re.compile(r"(YYYY|MM|DD|hh|mm|ss)")
_TEMPLATE_DEFAULTS = {"YYYY": 1970, "MM": 1, "DD": 1, "hh": 0, "mm": 0, "ss": 0}
#: Base para partes ausentes da data, para não depender do relógio.
_EPOCH = datetime(1970, 1, 1)


def _try_parse_isoformat(value: str) -> Optional[datetime]:
    candidate = value
    if candidate.endswith(("Z", "z")):
        candidate = candidate[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(candidate)
    except ValueError:
        return None


def parse_date(value: str) -> datetime:
    """Interpreta ISO-8601 e, na falta dele, grafias livres como ``July 21, 2025``.

    O fuso informado na entrada é preservado; sem fuso o valor é ingênuo.
    Partes ausentes vêm de 1970-01-01 (``"10:30"`` vira 1970-01-01 10:30).
    Texto que não é uma data levanta ``ConversionError``.
    """

    parsed = _try_parse_isoformat(value)
    if parsed is not None:
        return parsed
    try:
        return dateutil_parser.parse(value, default=_EPOCH)
    except (ValueError, OverflowError) as exc:
        raise ConversionError(f"Invalid date: {value!r}") from exc


def natural_date(default: Optional[datetime] = None, **options: Any) -> Converter[datetime]:
    """Conversor para datas em linguagem natural, via ``dateutil``."""

    return create_converter(
        lambda value: dateutil_parser.parse(value, fuzzy=True, default=default, **options),
        name="natural_date",
    )


def formatted_date(template: str) -> Converter[datetime]:
    """Conversor estrito baseado em um formato ``strftime`` como ``%d/%m/%Y``."""

    return create_converter(
        lambda value: datetime.strptime(value, template), name="formatted_date"
    )


def template_date(template: str) -> Converter[datetime]:
    """Conversor para modelos com os marcadores ``YYYY MM DD hh mm ss``.

    Os demais caracteres do modelo precisam aparecer literalmente na entrada.
    Marcadores ausentes assumem 1970-01-01 00:00:00.
    """

    parts = _TEMPLATE_TOKEN_RE.split(template)
    tokens = parts[1::2]
    pattern = re.compile(
        "".join(
            r"(\d+)" if index % 2 else re.escape(part)
            for index, part in enumerate(parts)
        )
    )

    def transform(value: str) -> datetime:
        match = pattern.fullmatch(value)
        if not match:
            raise ConversionError(
                f'Input "{value}" does not match template "{template}"'
            )
        fields = dict(_TEMPLATE_DEFAULTS)
        fields.update(zip(tokens, (int(group) for group in match.groups())))
        try:
            return datetime(
                fields["YYYY"],
                fields["MM"],
                fields["DD"],
                fields["hh"],
                fields["mm"],
                fields["ss"],
            )
        except ValueError as exc:
            raise ConversionError(
                f'Input "{value}" is not a valid date for template "{template}"'
            ) from exc

    return create_converter(transform, "text", name="template_date")


__all__ = ["formatted_date", "natural_date", "parse_date", "template_date"]
