"""Selector-based article content extraction."""

from typing import Optional, Sequence

import soupsieve
from bs4 import BeautifulSoup

from news_epub.adapters.extraction.rules import DEFAULT_REMOVAL_RULES, RemovalRule, prune
from news_epub.core import BlockKind, ContentBlock, ContentExtractor, ParseError

DEFAULT_CONTAINER_SELECTOR = "article"
CONTENT_SELECTOR = "h1, h2, h3, p"


class SelectorContentExtractor(ContentExtractor):
    """Extract headings and paragraphs from the main article container.

    Pages are first pruned with the configured removal rules. Only the first
    element matching the container selector is considered; pages without one
    yield no blocks.
    """

    def __init__(
        self,
        rules: Optional[Sequence[RemovalRule]] = None,
        container_selector: str = DEFAULT_CONTAINER_SELECTOR,
    ) -> None:
        self.rules = list(DEFAULT_REMOVAL_RULES if rules is None else rules)
        self._compiled_rules = [rule.compile() for rule in self.rules]
        self.container_selector = container_selector
        try:
            self._container = soupsieve.compile(container_selector)
        except soupsieve.SelectorSyntaxError as e:
            raise ParseError(f"Invalid container selector: {container_selector}") from e
        self._content = soupsieve.compile(CONTENT_SELECTOR)

    def extract(self, document: BeautifulSoup) -> list[ContentBlock]:
        """Prune the document and linearize its article content."""
        prune(document, self._compiled_rules)

        container = self._container.select_one(document)
        if container is None:
            return []

        return [
            ContentBlock(kind=BlockKind.from_tag(element.name), text=element.get_text())
            for element in self._content.select(container)
        ]
