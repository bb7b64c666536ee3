"""Business logic use cases."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from news_epub.core import (
    ContentExtractor,
    DocumentAssembler,
    FeedEntry,
    FeedReader,
    FeedSource,
    FetchError,
    PageScraper,
    ParseError,
    SectionRenderer,
    TimeWindow,
    filter_entries,
)

DEFAULT_AUTHOR = "Tagesschau"


@dataclass
class BuildReport:
    """Outcome of one ebook build."""

    feeds: int = 0
    articles: int = 0
    skipped: int = 0
    output_path: Optional[Path] = None


class EbookService:
    """Turn configured feeds into one ebook.

    Feeds and entries are processed strictly in order, one request at a time.
    Feed failures abort the build; article failures only skip that article.
    """

    def __init__(
        self,
        feed_reader: FeedReader,
        scraper: PageScraper,
        extractor: ContentExtractor,
        renderer: SectionRenderer,
        assembler_factory: Callable[[], DocumentAssembler],
        author: str = DEFAULT_AUTHOR,
    ) -> None:
        self.feed_reader = feed_reader
        self.scraper = scraper
        self.extractor = extractor
        self.renderer = renderer
        self.assembler_factory = assembler_factory
        self.author = author

    async def build(
        self, feeds: list[FeedSource], window: TimeWindow, output_path: Path
    ) -> BuildReport:
        """Build the ebook for ``window`` and write it to ``output_path``.

        Raises:
            FetchError, ParseError: a feed could not be fetched or parsed
            SerializationError: the ebook could not be written
        """
        assembler = self.assembler_factory()
        assembler.set_metadata(window.title(), self.author)
        report = BuildReport()

        for feed in feeds:
            print("\n" + "=" * 70)
            print(f"📡 {feed.title}")
            print("=" * 70)
            print(f"  └─ URL: {feed.url}")

            entries = await self.feed_reader.fetch_entries(feed.url)
            selected = filter_entries(entries, window)
            print(f"  └─ Entries: {len(entries)}, in window: {len(selected)}")

            handle = assembler.add_feed_section(feed.title, self.renderer.render_feed(feed.title))
            report.feeds += 1

            for i, entry in enumerate(selected, 1):
                print(f"\n  [{i}/{len(selected)}] {entry.title[:70]}")
                print(f"  └─ {entry.link}")

                fragment = await self._render_entry(entry)
                if fragment is None:
                    report.skipped += 1
                    continue

                assembler.add_article_section(handle, entry.title, fragment, entry.position)
                report.articles += 1

        report.output_path = assembler.finalize(output_path)
        return report

    async def _render_entry(self, entry: FeedEntry) -> Optional[str]:
        """Scrape, extract and render one entry; ``None`` when it is skipped."""
        try:
            document = await self.scraper.fetch_document(entry.link)
            blocks = self.extractor.extract(document)
        except (FetchError, ParseError) as e:
            print(f"  ⚠️  Skipped: {e}")
            return None

        if not blocks:
            print("  ⚠️  Skipped: no article content")
            return None

        print(f"  ✓ {len(blocks)} blocks")
        return self.renderer.render_article(entry.title, blocks)
