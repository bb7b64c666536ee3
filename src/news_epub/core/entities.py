"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

TITLE_DATE_FORMAT = "%d.%m.%Y %H:%M"


class BlockKind(str, Enum):
    """Semantic kind of an extracted content block."""

    HEADING1 = "heading1"
    HEADING2 = "heading2"
    HEADING3 = "heading3"
    PARAGRAPH = "paragraph"

    @property
    def tag(self) -> str:
        """HTML tag used to render this kind."""
        return _KIND_TO_TAG[self]

    @classmethod
    def from_tag(cls, tag: str) -> "BlockKind":
        """Map an HTML tag name (h1, h2, h3, p) to its block kind."""
        try:
            return _TAG_TO_KIND[tag.lower()]
        except KeyError:
            raise ValueError(f"Unsupported content tag: {tag}") from None


_KIND_TO_TAG = {
    BlockKind.HEADING1: "h1",
    BlockKind.HEADING2: "h2",
    BlockKind.HEADING3: "h3",
    BlockKind.PARAGRAPH: "p",
}
_TAG_TO_KIND = {tag: kind for kind, tag in _KIND_TO_TAG.items()}


@dataclass(frozen=True)
class FeedSource:
    """One configured feed to process."""

    title: str
    url: str

    def __post_init__(self) -> None:
        if not self.title:
            raise ValueError("Feed title cannot be empty")
        if not self.url:
            raise ValueError("Feed URL cannot be empty")


@dataclass
class FeedEntry:
    """One entry parsed from a feed.

    ``position`` is the entry's index in the feed's native order, kept even
    when earlier entries are dropped or filtered out.
    """

    title: str
    link: str
    published_at: Optional[datetime]
    position: int


@dataclass
class ContentBlock:
    """A heading or paragraph extracted from an article."""

    kind: BlockKind
    text: str


@dataclass
class Section:
    """Node of the output document hierarchy."""

    title: str
    level: int
    body: str
    children: list["Section"] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.level < 1:
            raise ValueError("Section level must be at least 1")
        if not self.body:
            raise ValueError("Section body cannot be empty")


@dataclass
class Document:
    """The assembled ebook."""

    metadata_title: str
    author: str
    sections: list[Section]


@dataclass(frozen=True)
class TimeWindow:
    """Closed interval of publication timestamps."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("Time window bounds must be timezone-aware")
        if self.start > self.end:
            raise ValueError("Time window start must not be after its end")

    def contains(self, timestamp: datetime) -> bool:
        return self.start <= timestamp <= self.end

    def title(self) -> str:
        """Book title describing this window."""
        return (
            f"Messages from {self.start.strftime(TITLE_DATE_FORMAT)} "
            f"to {self.end.strftime(TITLE_DATE_FORMAT)}"
        )
