"""Testes do motor de extração ``Crawler``."""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from peneira import ConversionError, Crawler, ElementNotFoundError, Method

_HTML = """
  <div id="root">
    <p class="title" data-id="123">Hello World</p>
    <span class="value" data-flag="true">42</span>
    <time class="date" datetime="2025-07-21T10:00:00Z">July 21, 2025</time>
    <a class="link" href="/anime/one-piece/ep-1000">Watch</a>
    <span class="views" data-count="" title="1.234 visualizações">  </span>
    <img class="lazy" data-src="/capa.jpg" src="/placeholder.gif">
    <img class="plain" src="/foto.jpg">
    <div class="card" data-lazy-src="/card.png"><b>Negrito</b> e texto</div>
    <p class="spaced">
        Texto com espaços
    </p>
    <ul class="numbers"><li>1</li><li>2</li><li>3</li></ul>
  </div>
"""


@pytest.fixture
def crawler() -> Crawler:
    return Crawler.from_html(_HTML)


def test_gets_text_content(crawler: Crawler) -> None:
    assert crawler.get(".title") == "Hello World"


def test_gets_html_content(crawler: Crawler) -> None:
    assert crawler.get(".title", None, "html") == "Hello World"
    assert crawler.get(".card", None, "html") == "<b>Negrito</b> e texto"


def test_gets_attribute_value(crawler: Crawler) -> None:
    assert crawler.get(".title", None, "attr-data-id") == "123"
    assert crawler.get(".title", None, ":data-id") == "123"


def test_gets_data_attribute(crawler: Crawler) -> None:
    assert crawler.get(".value", None, "data-flag") == "true"
    assert crawler.get(".value", None, ".flag") == "true"
    assert crawler.get(".card", None, ".lazySrc") == "/card.png"


def test_text_is_trimmed(crawler: Crawler) -> None:
    assert crawler.get(".spaced") == "Texto com espaços"


def test_typed_converters(crawler: Crawler) -> None:
    assert crawler.get(".value", Crawler.types.int) == 42
    assert crawler.get(".value", Crawler.types.bool, "data-flag") is True
    assert crawler.get(".date", Crawler.types.date, "attr-datetime") == datetime(
        2025, 7, 21, 10, tzinfo=timezone.utc
    )
    assert crawler.get(".date", Crawler.types.date) == datetime(2025, 7, 21)


def test_converter_for_is_exposed(crawler: Crawler) -> None:
    assert crawler.get(".value", Crawler.converter_for("float?")) == 42.0


def test_regexp_in_text_and_attribute() -> None:
    crawler = Crawler.from_html(
        '<span class="page">Page 42</span><a class="next" href="/page/43">Next</a>'
    )
    types = Crawler.types

    assert crawler.get(".page", types.regexp(r"Page (\d+)", types.int), "text") == 42
    assert crawler.get(".next", types.regexp(r"/page/(\d+)$", types.int), ":href") == 43


def test_regexp_failure_propagates() -> None:
    crawler = Crawler.from_html('<span class="email">no-email</span>')

    with pytest.raises(ConversionError, match="No match found for pattern"):
        crawler.get(".email", Crawler.types.regexp(r"\w+@\w+\.\w+", Crawler.types.str))


def test_slug_reads_href_by_default(crawler: Crawler) -> None:
    assert crawler.get(".link", Crawler.types.slug(1)) == "one-piece/ep-1000"
    assert crawler.get(".link", Crawler.types.slug(1, 1), ":href") == "one-piece"


def test_source_falls_back_from_data_to_attribute(crawler: Crawler) -> None:
    assert crawler.get("img.lazy", Crawler.types.source) == "/capa.jpg"
    assert crawler.get("img.plain", Crawler.types.source) == "/foto.jpg"


def test_method_list_uses_first_non_empty_text(crawler: Crawler) -> None:
    converter = Crawler.types.regexp(r"([\d.]+)", Crawler.types.str)

    assert crawler.get(".views", converter, [".count", "text", ":title"]) == "1.234"


def test_method_list_fallback_with_int() -> None:
    crawler = Crawler.from_html('<span class="n" data-n="" title="42"></span>')

    assert crawler.get(".n", Crawler.types.int, [".n", ":title"]) == 42


def test_method_order_is_respected() -> None:
    crawler = Crawler.from_html('<span class="n" data-n="7" title="42"></span>')

    assert crawler.get(".n", Crawler.types.int, [":title", ".n"]) == 42
    assert crawler.get(".n", Crawler.types.int, [Method.data("n"), ":title"]) == 7


def test_all_methods_empty_converts_empty_text(crawler: Crawler) -> None:
    assert crawler.get(".views", None, [".count", "text"]) == ""
    assert crawler.get(".views", Crawler.types.optional_int, [".count", "text"]) is None
    assert crawler.get(".title", None, ":missing") == ""
    with pytest.raises(ConversionError):
        crawler.get(".views", Crawler.types.regexp(r"\d+", Crawler.types.int), ".count")


def test_missing_element_raises(crawler: Crawler) -> None:
    with pytest.raises(ElementNotFoundError, match=r"\.nope") as excinfo:
        crawler.get(".nope")

    assert excinfo.value.selector == ".nope"
    assert isinstance(excinfo.value, LookupError)


def test_get_reads_first_match(crawler: Crawler) -> None:
    assert crawler.get(".numbers li", Crawler.types.int) == 1


def test_get_all_returns_values_in_document_order(crawler: Crawler) -> None:
    assert crawler.get_all(".numbers li", Crawler.types.int) == [1, 2, 3]


def test_get_all_over_zero_matches_is_empty(crawler: Crawler) -> None:
    assert crawler.get_all(".nope", Crawler.types.int) == []


def test_selector_as_element_handle(crawler: Crawler) -> None:
    element = crawler.document.select(".title")[0]

    assert crawler.get(element) == "Hello World"
    assert crawler.get_all(element) == ["Hello World"]


def test_selector_as_collection(crawler: Crawler) -> None:
    items = crawler.document.select(".numbers li")[1:]

    assert crawler.get(items, Crawler.types.int) == 2
    assert crawler.get_all(items, Crawler.types.int) == [2, 3]
    with pytest.raises(ElementNotFoundError):
        crawler.get([])


def test_selector_as_function(crawler: Crawler) -> None:
    def last_item(document):
        return document.select(".numbers li")[-1:]

    assert crawler.get(last_item, Crawler.types.int) == 3


def test_within_scopes_string_selectors(crawler: Crawler) -> None:
    numbers = crawler.document.select(".numbers")[0]

    assert crawler.get_all("li", Crawler.types.int, within=numbers) == [1, 2, 3]
    assert crawler.get_all("p", within=numbers) == []


def test_within_rejects_non_string_selectors(crawler: Crawler) -> None:
    numbers = crawler.document.select(".numbers")[0]
    items = crawler.document.select(".numbers li")

    with pytest.raises(TypeError):
        crawler.get(items, within=numbers)
    with pytest.raises(TypeError):
        crawler.get_all(lambda document: items, within=numbers)


def test_unsupported_selector_type(crawler: Crawler) -> None:
    with pytest.raises(TypeError):
        crawler.get(42)


def test_default_string_converter_equals_trimmed_text(crawler: Crawler) -> None:
    for element in crawler.document.select("p, span, li"):
        expected = crawler.document.text(element).strip()
        assert crawler.get(element) == expected
