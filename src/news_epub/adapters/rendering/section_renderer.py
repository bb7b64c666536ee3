"""XHTML section renderer."""

from html import escape

from news_epub.core import ContentBlock, SectionRenderer

_HEAD = [
    '<?xml version="1.0" encoding="UTF-8"?>',
    '<html xmlns="http://www.w3.org/1999/xhtml" xml:lang="{lang}" lang="{lang}">',
    "<head>",
    "<title>{title}</title>",
    "</head>",
    "<body>",
]
_TAIL = [
    "</body>",
    "</html>",
    "",
]


class XhtmlSectionRenderer(SectionRenderer):
    """Render feed and article sections as minimal XHTML documents."""

    def __init__(self, language: str = "en") -> None:
        self.language = language

    def render_feed(self, title: str) -> str:
        """Shell containing only the feed title as ``<h1>``."""
        return self._wrap(title, [f"    <h1>{escape(title)}</h1>"])

    def render_article(self, title: str, blocks: list[ContentBlock]) -> str:
        """One element per block, in order, tag matching the block kind."""
        if not blocks:
            raise ValueError("Cannot render an article without content blocks")

        body = [
            f"    <{block.kind.tag}>{escape(block.text)}</{block.kind.tag}>"
            for block in blocks
        ]
        return self._wrap(title, body)

    def _wrap(self, title: str, body: list[str]) -> str:
        head = [line.format(lang=escape(self.language), title=escape(title)) for line in _HEAD]
        return "\n".join(head + body + _TAIL)
