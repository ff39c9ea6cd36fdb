"""Testes para a montagem de registros a partir de campos declarados."""
from __future__ import annotations

import pytest

from peneira import Crawler, ElementNotFoundError, Field, types

_LISTING = """
<html>
  <body>
    <div class="post">
      <h2 class="post-title"><a href="/noticias/2024/06/primeira">Título 1</a></h2>
      <span class="views">120 leituras</span>
      <img data-src="/capa-1.jpg" src="/placeholder.gif">
      <ul class="tags"><li>politica</li><li>cidade</li></ul>
    </div>
    <div class="post">
      <h2 class="post-title"><a href="/noticias/2024/06/segunda">Título 2</a></h2>
      <img src="/capa-2.jpg">
    </div>
  </body>
</html>
"""


@pytest.fixture
def crawler() -> Crawler:
    return Crawler.from_html(_LISTING)


@pytest.fixture
def fields() -> dict[str, Field]:
    return {
        "title": Field(query="h2.post-title"),
        "slug": Field(query="h2.post-title a", converter=types.slug(3)),
        "views": Field(
            query="span.views",
            converter=types.regexp(r"(\d+)", types.int),
            optional=True,
        ),
        "cover": Field(query="img", converter=types.source),
        "tags": Field(query=".tags li", many=True),
    }


def test_extract_all_builds_one_record_per_item(crawler: Crawler, fields) -> None:
    records = crawler.extract_all("div.post", fields)

    assert records == [
        {
            "title": "Título 1",
            "slug": "primeira",
            "views": 120,
            "cover": "/capa-1.jpg",
            "tags": ["politica", "cidade"],
        },
        {
            "title": "Título 2",
            "slug": "segunda",
            "views": None,
            "cover": "/capa-2.jpg",
            "tags": [],
        },
    ]


def test_extract_all_over_zero_items_is_empty(crawler: Crawler, fields) -> None:
    assert crawler.extract_all("article.missing", fields) == []


def test_extract_uses_whole_document_without_scope(crawler: Crawler) -> None:
    record = crawler.extract(
        {
            "first_title": Field(query="h2.post-title"),
            "links": Field(query="h2 a", method=":href", many=True),
        }
    )

    assert record == {
        "first_title": "Título 1",
        "links": ["/noticias/2024/06/primeira", "/noticias/2024/06/segunda"],
    }


def test_extract_required_field_missing_raises(crawler: Crawler) -> None:
    with pytest.raises(ElementNotFoundError):
        crawler.extract({"author": Field(query=".author")})


def test_extract_method_overrides_converter_default(crawler: Crawler) -> None:
    record = crawler.extract({"cover": Field(query="img", converter=types.source, method=":src")})

    assert record == {"cover": "/placeholder.gif"}
