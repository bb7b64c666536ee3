"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from bs4 import BeautifulSoup

from news_epub.core.entities import ContentBlock, Document, FeedEntry


@dataclass(frozen=True)
class SectionHandle:
    """Reference to a feed-level section, used to attach article sections."""

    index: int


class FeedReader(ABC):
    """Interface for fetching the entry list of one feed."""

    @abstractmethod
    async def fetch_entries(self, url: str) -> list[FeedEntry]:
        """Fetch and parse feed entries in native order."""
        pass


class PageScraper(ABC):
    """Interface for fetching an article page as a DOM."""

    @abstractmethod
    async def fetch_document(self, url: str) -> BeautifulSoup:
        """Fetch a page and parse it into a mutable DOM tree."""
        pass


class ContentExtractor(ABC):
    """Interface for turning an article DOM into content blocks."""

    @abstractmethod
    def extract(self, document: BeautifulSoup) -> list[ContentBlock]:
        """Extract ordered content blocks; empty when nothing usable is found."""
        pass


class SectionRenderer(ABC):
    """Interface for rendering sections into markup."""

    @abstractmethod
    def render_feed(self, title: str) -> str:
        """Render the top-level section of a feed."""
        pass

    @abstractmethod
    def render_article(self, title: str, blocks: list[ContentBlock]) -> str:
        """Render an article's content blocks."""
        pass


class DocumentAssembler(ABC):
    """Interface for accumulating sections and writing the final artifact."""

    @abstractmethod
    def set_metadata(self, title: str, author: str) -> None:
        pass

    @abstractmethod
    def add_feed_section(self, title: str, rendered_shell: str) -> SectionHandle:
        pass

    @abstractmethod
    def add_article_section(
        self, parent: SectionHandle, title: str, rendered_fragment: str, order_index: int
    ) -> None:
        pass

    @abstractmethod
    def document(self) -> Document:
        """Snapshot of the document assembled so far."""
        pass

    @abstractmethod
    def finalize(self, output_path: Path) -> Path:
        """Serialize the document once and return the written path."""
        pass
