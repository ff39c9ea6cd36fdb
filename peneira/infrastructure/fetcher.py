"""Obtenção de páginas HTML via requests."""
from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import requests

from peneira.domain import DocumentFetcher, QueryParams, RetrievalError
from peneira.settings import get_http_timeout, get_user_agent

_DEFAULT_HEADERS = {
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"  # padrão navegador
        "image/avif,image/webp,image/apng,*/*;q=0.8"
    ),
    "Accept-Language": "pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7",
    "Accept-Encoding": "gzip, deflate",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
    "Pragma": "no-cache",
    "Cache-Control": "no-cache",
}


class RequestsFetcher(DocumentFetcher):
    """Busca documentos com uma :class:`requests.Session` reutilizável."""

    def __init__(
        self,
        session: requests.Session | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> None:
        self._session = session or requests.Session()
        self._headers = dict(headers or {})
        self._timeout = timeout
        self._log = logging.getLogger("peneira.fetcher")

    def fetch(
        self, url: str, query: Optional[QueryParams] = None, **options: Any
    ) -> str:
        """Executa um GET e devolve o corpo da resposta.

        ``query`` é anexado à URL; listas viram chaves repetidas. Demais
        opções (``headers``, ``cookies``, ``allow_redirects``...) seguem para
        :meth:`requests.Session.get`.
        """

        headers = self._build_headers(options.pop("headers", None))
        options.setdefault("timeout", self._timeout or get_http_timeout())
        params = {key: _as_param(value) for key, value in (query or {}).items()}

        self._log.info("GET %s", url)
        try:
            response = self._session.get(
                url, params=params or None, headers=headers, **options
            )
        except requests.RequestException as exc:
            raise RetrievalError(
                f"Failed to fetch {url} ({exc})",
                url=url,
                response=getattr(exc, "response", None),
            ) from exc

        if response.status_code >= 400:
            self._log.warning("GET %s retornou %s", url, response.status_code)
            raise RetrievalError(
                f"Failed to fetch {url} ({response.status_code})",
                url=url,
                response=response,
            )
        return response.text

    def _build_headers(
        self, extra: Mapping[str, str] | None = None
    ) -> dict[str, str]:
        """Combina cabeçalhos padrão, os da instância e os da chamada.

        Valores mais específicos prevalecem; valores vazios são ignorados.
        """

        headers: dict[str, str] = dict(_DEFAULT_HEADERS)
        headers["User-Agent"] = get_user_agent()
        headers.update(self._headers)
        if extra:
            headers.update({k: v for k, v in extra.items() if v})
        return headers


def _as_param(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return str(value)


__all__ = ["RequestsFetcher"]
