"""Core domain layer."""

from news_epub.core.entities import (
    BlockKind,
    ContentBlock,
    Document,
    FeedEntry,
    FeedSource,
    Section,
    TimeWindow,
)
from news_epub.core.errors import FetchError, ParseError, PipelineError, SerializationError
from news_epub.core.interfaces import (
    ContentExtractor,
    DocumentAssembler,
    FeedReader,
    PageScraper,
    SectionHandle,
    SectionRenderer,
)
from news_epub.core.time_filter import filter_entries, is_in_window

__all__ = [
    "BlockKind",
    "ContentBlock",
    "Document",
    "FeedEntry",
    "FeedSource",
    "Section",
    "TimeWindow",
    "PipelineError",
    "FetchError",
    "ParseError",
    "SerializationError",
    "FeedReader",
    "PageScraper",
    "ContentExtractor",
    "SectionRenderer",
    "DocumentAssembler",
    "SectionHandle",
    "filter_entries",
    "is_in_window",
]
