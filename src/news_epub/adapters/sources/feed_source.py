"""RSS/Atom feed source."""

import io
from datetime import datetime, timezone
from typing import Optional

import feedparser

from news_epub.adapters.http_fetch import HttpFetcher
from news_epub.core import FeedEntry, FeedReader, ParseError


class RSSFeedSource(FeedReader):
    """Fetch a feed over HTTP and parse its entries."""

    def __init__(self, fetcher: Optional[HttpFetcher] = None) -> None:
        self.fetcher = fetcher or HttpFetcher()

    async def fetch_entries(self, url: str) -> list[FeedEntry]:
        """Fetch feed entries in the feed's native order."""
        response = await self.fetcher.get(url)
        return self._parse_feed(response.content, dict(response.headers))

    def _parse_feed(self, payload: bytes, headers: Optional[dict] = None) -> list[FeedEntry]:
        """Parse RSS or Atom payload into entries."""
        feed = feedparser.parse(io.BytesIO(payload), response_headers=headers)

        # feedparser leaves the version empty for anything it cannot identify
        if not feed.get("version"):
            reason = feed.get("bozo_exception") or "unknown format"
            raise ParseError(f"Payload is not an RSS/Atom feed: {reason}")

        entries = []
        for position, entry in enumerate(feed.entries):
            link = entry.get("link")
            if not link:
                continue

            entries.append(FeedEntry(
                title=(entry.get("title") or "").strip() or link,
                link=link,
                published_at=self._parse_date(entry),
                position=position,
            ))

        return entries

    def _parse_date(self, entry: feedparser.FeedParserDict) -> Optional[datetime]:
        """Publication date of the entry as aware UTC datetime."""
        published = entry.get("published_parsed")
        if not published:
            return None
        return datetime(*published[:6], tzinfo=timezone.utc)
