"""Removal rules applied to article pages before extraction."""

from dataclasses import dataclass

import soupsieve
from bs4 import BeautifulSoup, Tag

from news_epub.core import ParseError


@dataclass(frozen=True)
class RemovalRule:
    """A named CSS selector whose matches are pruned with their subtrees."""

    name: str
    selector: str

    def compile(self) -> soupsieve.SoupSieve:
        try:
            return soupsieve.compile(self.selector)
        except soupsieve.SelectorSyntaxError as e:
            raise ParseError(f"Invalid selector for rule '{self.name}': {self.selector}") from e


# Info boxes are removed wholesale instead of being restyled in place.
DEFAULT_REMOVAL_RULES: tuple[RemovalRule, ...] = (
    RemovalRule("copytext element wrapper", ".copytext-element-wrapper"),
    RemovalRule("article footer", ".meldungsfooter"),
    RemovalRule("inline video", ".copytext__video"),
    RemovalRule("external embed placeholder", ".external-embed__placeholder"),
    RemovalRule("info box", ".infobox"),
)


def prune(document: BeautifulSoup, selectors: list[soupsieve.SoupSieve]) -> int:
    """
    Detach every element matching any of the selectors, in rule order.

    Returns:
        Number of elements removed
    """
    removed = 0
    for selector in selectors:
        matches: list[Tag] = selector.select(document)
        for element in matches:
            element.extract()
            removed += 1
    return removed
