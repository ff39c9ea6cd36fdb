"""Interface de linha de comando para extrair campos de páginas HTML."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from peneira.application import Crawler
from peneira.converters import converter_for
from peneira.domain import PeneiraError
from peneira.schemas import ExtractionPlanPayload
from peneira.settings import get_log_level


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Peneira - extração de campos tipados em páginas HTML"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    get = subparsers.add_parser(
        "get", help="Extrai um valor (ou todos, com --all) de um seletor CSS"
    )
    get.add_argument("source", help="URL http(s) ou caminho de um arquivo HTML")
    get.add_argument("selector", help="Seletor CSS do elemento")
    get.add_argument(
        "--type",
        default="str",
        help="Conversor do registro: str, int, float, bool, json, date, source... "
        "Use o sufixo '?' para a variante opcional (ex.: 'int?')",
    )
    get.add_argument(
        "--method",
        action="append",
        default=None,
        help=(
            "Método de leitura (text, html, :atributo, .data). "
            "Pode ser repetido para definir a ordem de tentativas"
        ),
    )
    get.add_argument(
        "--all",
        action="store_true",
        help="Extrai o valor de todos os elementos encontrados",
    )

    extract = subparsers.add_parser(
        "extract", help="Extrai registros a partir de um plano de campos em JSON"
    )
    extract.add_argument("source", help="URL http(s) ou caminho de um arquivo HTML")
    extract.add_argument("plan", type=Path, help="Caminho para o plano em JSON")

    for sp in (get, extract):
        sp.add_argument(
            "--query",
            action="append",
            default=[],
            metavar="CHAVE=VALOR",
            help="Parâmetro de query string adicionado à URL (pode ser repetido)",
        )
        sp.add_argument(
            "--log-level",
            default=None,
            help="Nível de log: DEBUG, INFO, WARNING, ERROR (padrão INFO)",
        )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    level_name = getattr(args, "log_level", None) or get_log_level()
    handler = RichHandler(console=Console(stderr=True), markup=True, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    logger = logging.getLogger("peneira.cli")

    try:
        if args.command == "get":
            crawler = _open_source(args.source, args.query)
            converter = converter_for(args.type)
            if args.all:
                result: Any = crawler.get_all(args.selector, converter, args.method)
            else:
                result = crawler.get(args.selector, converter, args.method)
        elif args.command == "extract":
            plan = _load_plan(args.plan)
            crawler = _open_source(args.source, args.query)
            fields = plan.to_domain()
            if plan.items:
                result = crawler.extract_all(plan.items, fields)
                logger.info("%d registro(s) extraído(s)", len(result))
            else:
                result = crawler.extract(fields)
        else:
            raise ValueError(f"Comando desconhecido: {args.command}")
    except (PeneiraError, ValidationError, KeyError, ValueError, OSError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        sys.exit(1)

    console.print_json(data=result, default=_json_default)


def _open_source(source: str, raw_query: list[str]) -> Crawler:
    if source.startswith(("http://", "https://")):
        return Crawler.load(source, _parse_query(raw_query))
    path = Path(source)
    return Crawler.from_html(path.read_text(encoding="utf-8"))


def _parse_query(items: list[str]) -> dict[str, list[str]]:
    query: dict[str, list[str]] = {}
    for item in items:
        key, separator, value = item.partition("=")
        if not separator or not key:
            raise ValueError(f"Parâmetro de query inválido: '{item}' (use CHAVE=VALOR)")
        query.setdefault(key, []).append(value)
    return query


def _load_plan(path: Path) -> ExtractionPlanPayload:
    data = json.loads(path.read_text(encoding="utf-8"))
    return ExtractionPlanPayload.model_validate(data)


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


if __name__ == "__main__":
    main()
