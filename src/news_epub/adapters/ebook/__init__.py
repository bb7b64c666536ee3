"""Ebook assembly."""

from news_epub.adapters.ebook.epub_assembler import EpubDocumentAssembler

__all__ = ["EpubDocumentAssembler"]
