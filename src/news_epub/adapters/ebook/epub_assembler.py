"""EPUB document assembler."""

import bisect
import copy
import os
import uuid
from pathlib import Path
from typing import Optional

from ebooklib import epub

from news_epub.core import Document, DocumentAssembler, Section, SectionHandle, SerializationError

FEED_LEVEL = 1
ARTICLE_LEVEL = 2


class EpubDocumentAssembler(DocumentAssembler):
    """Accumulate feed and article sections for one run and write them as EPUB.

    Article sections are kept sorted by their order index within the parent
    feed section, so insertion order does not affect the output.
    """

    def __init__(self, language: str = "en") -> None:
        self.language = language
        self._title: Optional[str] = None
        self._author: Optional[str] = None
        self._sections: list[Section] = []
        self._order_indexes: list[list[int]] = []
        self._finalized = False

    def set_metadata(self, title: str, author: str) -> None:
        self._check_open()
        if self._sections:
            raise RuntimeError("Metadata must be set before sections are added")
        if self._title is not None:
            raise RuntimeError("Metadata is already set")
        self._title = title
        self._author = author

    def add_feed_section(self, title: str, rendered_shell: str) -> SectionHandle:
        self._check_open()
        self._sections.append(Section(title=title, level=FEED_LEVEL, body=rendered_shell))
        self._order_indexes.append([])
        return SectionHandle(index=len(self._sections) - 1)

    def add_article_section(
        self, parent: SectionHandle, title: str, rendered_fragment: str, order_index: int
    ) -> None:
        self._check_open()
        if not 0 <= parent.index < len(self._sections):
            raise ValueError(f"Unknown section handle: {parent}")

        indexes = self._order_indexes[parent.index]
        if order_index in indexes:
            raise ValueError(f"Order index {order_index} already used in section {parent.index}")

        section = Section(title=title, level=ARTICLE_LEVEL, body=rendered_fragment)
        position = bisect.bisect(indexes, order_index)
        indexes.insert(position, order_index)
        self._sections[parent.index].children.insert(position, section)

    def document(self) -> Document:
        return Document(
            metadata_title=self._title or "",
            author=self._author or "",
            sections=copy.deepcopy(self._sections),
        )

    def finalize(self, output_path: Path) -> Path:
        """Write the EPUB to ``output_path``.

        The book is written to a temporary file next to the destination and
        moved into place only once complete.
        """
        self._check_open()
        if self._title is None:
            raise RuntimeError("Metadata must be set before finalizing")
        self._finalized = True

        book = self._build_book()
        tmp_path = output_path.with_name(f".{output_path.name}.tmp")
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            writer = epub.EpubWriter(str(tmp_path), book, {})
            writer.process()
            writer.write()
            os.replace(tmp_path, output_path)
        except (OSError, epub.EpubException) as e:
            if tmp_path.exists():
                tmp_path.unlink()
            raise SerializationError(f"Could not write {output_path}: {e}") from e

        return output_path

    def _build_book(self) -> epub.EpubBook:
        book = epub.EpubBook()
        book.set_identifier(str(uuid.uuid5(uuid.NAMESPACE_URL, f"news-epub:{self._title}")))
        book.set_title(self._title)
        book.set_language(self.language)
        book.add_author(self._author)

        toc: list = []
        # Nav first: inline table of contents
        spine: list = ["nav"]

        for i, (feed, indexes) in enumerate(zip(self._sections, self._order_indexes)):
            feed_item = self._content_item(feed, f"chapter_{i}.xhtml")
            book.add_item(feed_item)
            spine.append(feed_item)

            article_items = []
            for j, article in zip(indexes, feed.children):
                article_item = self._content_item(article, f"chapter_{i}_{j}.xhtml")
                book.add_item(article_item)
                spine.append(article_item)
                article_items.append(article_item)

            if article_items:
                toc.append((epub.Section(feed.title, href=feed_item.file_name), article_items))
            else:
                toc.append(feed_item)

        book.toc = toc
        book.spine = spine
        book.add_item(epub.EpubNcx())
        book.add_item(epub.EpubNav())
        return book

    def _content_item(self, section: Section, file_name: str) -> epub.EpubHtml:
        return epub.EpubHtml(
            title=section.title,
            file_name=file_name,
            lang=self.language,
            content=section.body.encode("utf-8"),
        )

    def _check_open(self) -> None:
        if self._finalized:
            raise RuntimeError("Document has already been finalized")
