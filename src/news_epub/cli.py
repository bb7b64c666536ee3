"""CLI entry point for news-epub."""

import asyncio
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

import httpx
import typer

from news_epub.adapters.ebook import EpubDocumentAssembler
from news_epub.adapters.extraction import SelectorContentExtractor
from news_epub.adapters.http_fetch import HttpFetcher
from news_epub.adapters.rendering import XhtmlSectionRenderer
from news_epub.adapters.scraper import ArticleScraper
from news_epub.adapters.sources import RSSFeedSource
from news_epub.config import ConfigError, Settings, get_settings
from news_epub.core import PipelineError, TimeWindow
from news_epub.use_cases import BuildReport, EbookService


def resolve_window(min_days: int, max_days: int, now: Optional[datetime] = None) -> TimeWindow:
    """Window from ``max_days`` ago up to ``min_days`` ago, in local time."""
    if min_days < 0 or max_days < 0:
        raise ValueError("Day offsets must not be negative")
    if min_days > max_days:
        raise ValueError("--min must not be greater than --max")

    now = now or datetime.now().astimezone()
    return TimeWindow(start=now - timedelta(days=max_days), end=now - timedelta(days=min_days))


def main(
    config: Path = typer.Option(Path("config.yaml"), "--config", "-c", help="Config file (YAML)"),
    min_days: int = typer.Option(0, "--min", help="Newest entries to include, in days ago"),
    max_days: int = typer.Option(1, "--max", help="Oldest entries to include, in days ago"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output EPUB path"),
) -> None:
    """Build an EPUB from the configured news feeds."""
    try:
        settings = get_settings(config)
        window = resolve_window(min_days, max_days)
    except (ConfigError, ValueError) as e:
        print(f"❌ {e}")
        raise typer.Exit(code=1)

    try:
        report = asyncio.run(async_run(settings, window, output or settings.output_path))
    except PipelineError as e:
        print(f"\n❌ {type(e).__name__}: {e}")
        raise typer.Exit(code=1)

    print("\n" + "=" * 70)
    print("✅ DONE")
    print("=" * 70)
    print(f"  • Feeds: {report.feeds}")
    print(f"  • Articles: {report.articles}")
    print(f"  • Skipped: {report.skipped}")
    print(f"📖 Ebook saved: {report.output_path}")


def app() -> None:
    """CLI entry point."""
    typer.run(main)


async def async_run(settings: Settings, window: TimeWindow, output: Path) -> BuildReport:
    """Async implementation of the build command."""
    print("\n" + "=" * 70)
    print(f"📰 {window.title()}")
    print("=" * 70)
    print(f"  • Feeds: {len(settings.feeds)}")
    print(f"  • Exclusion rules: {len(settings.removal_rules)}")
    print(f"  • Output: {output}")

    async with httpx.AsyncClient(
        timeout=settings.http.timeout,
        follow_redirects=True,
    ) as client:
        fetcher = HttpFetcher(client=client, user_agent=settings.http.user_agent)
        service = EbookService(
            feed_reader=RSSFeedSource(fetcher),
            scraper=ArticleScraper(fetcher),
            extractor=SelectorContentExtractor(
                rules=settings.removal_rules,
                container_selector=settings.extraction.container,
            ),
            renderer=XhtmlSectionRenderer(language=settings.book.language),
            assembler_factory=lambda: EpubDocumentAssembler(language=settings.book.language),
            author=settings.author,
        )
        return await service.build(settings.feeds, window, output)


if __name__ == "__main__":
    app()
