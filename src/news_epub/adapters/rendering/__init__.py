"""Section rendering."""

from news_epub.adapters.rendering.section_renderer import XhtmlSectionRenderer

__all__ = ["XhtmlSectionRenderer"]
