"""Configurações compartilhadas carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/126.0.0.0 Safari/537.36"
)
_DEFAULT_HTTP_TIMEOUT = 15.0
_DEFAULT_HTML_PARSER = "html.parser"
_DEFAULT_LOG_LEVEL = "INFO"


@lru_cache(maxsize=None)
def get_user_agent() -> str:
    """Retorna o User-Agent enviado nas requisições HTTP."""

    return os.getenv("PENEIRA_USER_AGENT", _DEFAULT_USER_AGENT)


@lru_cache(maxsize=None)
def get_http_timeout() -> float:
    """Retorna o tempo máximo, em segundos, de espera por uma resposta."""

    return float(os.getenv("PENEIRA_HTTP_TIMEOUT", _DEFAULT_HTTP_TIMEOUT))


@lru_cache(maxsize=None)
def get_html_parser() -> str:
    """Retorna o parser utilizado pelo BeautifulSoup (``html.parser``, ``lxml``...)."""

    return os.getenv("PENEIRA_HTML_PARSER", _DEFAULT_HTML_PARSER)


@lru_cache(maxsize=None)
def get_log_level() -> str:
    """Retorna o nível de log padrão da linha de comando."""

    return os.getenv("PENEIRA_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()


__all__ = [
    "get_html_parser",
    "get_http_timeout",
    "get_log_level",
    "get_user_agent",
]
