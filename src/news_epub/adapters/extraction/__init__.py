"""Article content extraction."""

from news_epub.adapters.extraction.content_extractor import SelectorContentExtractor
from news_epub.adapters.extraction.rules import DEFAULT_REMOVAL_RULES, RemovalRule

__all__ = ["SelectorContentExtractor", "RemovalRule", "DEFAULT_REMOVAL_RULES"]
