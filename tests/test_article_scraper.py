"""Tests for article page scraper."""

import httpx
import pytest

from news_epub.adapters.extraction import SelectorContentExtractor
from news_epub.adapters.http_fetch import HttpFetcher
from news_epub.adapters.scraper import ArticleScraper
from news_epub.core import FetchError, ParseError

ARTICLE_URL = "https://example.com/story"


def make_scraper(handler) -> ArticleScraper:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return ArticleScraper(HttpFetcher(client=client))


@pytest.mark.asyncio
async def test_fetch_document():
    """Test fetching and parsing an HTML page."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            headers={"content-type": "text/html; charset=utf-8"},
            text="<html><body><article><p>Hallo Welt</p></article></body></html>",
        )

    document = await make_scraper(handler).fetch_document(ARTICLE_URL)

    assert document.find("article").p.get_text() == "Hallo Welt"


@pytest.mark.asyncio
async def test_malformed_html_is_tolerated():
    """Test that broken markup is parsed best-effort."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            headers={"content-type": "text/html"},
            text="<article><p>Unclosed <b>bold<p>Second",
        )

    document = await make_scraper(handler).fetch_document(ARTICLE_URL)

    assert document.find("article") is not None
    assert "Second" in document.get_text()


@pytest.mark.asyncio
async def test_optional_end_tags_give_separate_paragraphs():
    """Test paragraphs without closing tags are not nested into each other."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            headers={"content-type": "text/html"},
            text="<html><body><article><p>a<p>b</article></body></html>",
        )

    document = await make_scraper(handler).fetch_document(ARTICLE_URL)
    blocks = SelectorContentExtractor().extract(document)

    assert [block.text for block in blocks] == ["a", "b"]


@pytest.mark.asyncio
async def test_invalid_url_raises_fetch_error():
    """Test that an unparseable link fails with FetchError."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<p>unreachable</p>")

    with pytest.raises(FetchError, match="Invalid URL"):
        await make_scraper(handler).fetch_document("http://example.com:abc/x")


@pytest.mark.asyncio
async def test_http_404_raises_fetch_error():
    """Test that a missing page fails with FetchError."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="Not Found")

    with pytest.raises(FetchError, match="HTTP 404"):
        await make_scraper(handler).fetch_document(ARTICLE_URL)


@pytest.mark.asyncio
async def test_binary_content_type_raises_parse_error():
    """Test that non-text payloads fail with ParseError."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, headers={"content-type": "image/png"}, content=b"\x89PNG\r\n")

    with pytest.raises(ParseError, match="non-text"):
        await make_scraper(handler).fetch_document(ARTICLE_URL)


@pytest.mark.asyncio
async def test_binary_bytes_raise_parse_error():
    """Test that payloads with NUL bytes fail with ParseError."""
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"\x00\x01\x02binary")

    with pytest.raises(ParseError, match="binary"):
        await make_scraper(handler).fetch_document(ARTICLE_URL)
