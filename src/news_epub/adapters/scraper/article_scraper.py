"""Article page scraper."""

from typing import Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from news_epub.adapters.http_fetch import HttpFetcher
from news_epub.core import PageScraper, ParseError

_TEXT_MARKERS = ("text/", "html", "xml")


class ArticleScraper(PageScraper):
    """Fetch an article page and parse it with BeautifulSoup."""

    def __init__(self, fetcher: Optional[HttpFetcher] = None, parser: str = "lxml") -> None:
        self.fetcher = fetcher or HttpFetcher()
        self.parser = parser

    async def fetch_document(self, url: str) -> BeautifulSoup:
        """Fetch ``url`` and return its DOM.

        Malformed HTML is parsed best-effort; only non-text payloads are
        rejected with ``ParseError``.
        """
        response = await self.fetcher.get(url)

        content_type = response.headers.get("content-type", "").lower()
        if content_type and not any(marker in content_type for marker in _TEXT_MARKERS):
            raise ParseError(f"{url} returned non-text content ({content_type})")
        if b"\x00" in response.content:
            raise ParseError(f"{url} returned binary content")

        try:
            return BeautifulSoup(response.text, self.parser)
        except ParserRejectedMarkup as e:
            raise ParseError(f"Could not parse {url}: {e}") from e
