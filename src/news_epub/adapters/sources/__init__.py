"""Feed source adapters."""

from news_epub.adapters.sources.feed_source import RSSFeedSource

__all__ = ["RSSFeedSource"]
