"""Tests for selector-based content extraction."""

import pytest
from bs4 import BeautifulSoup

from news_epub.adapters.extraction import DEFAULT_REMOVAL_RULES, RemovalRule, SelectorContentExtractor
from news_epub.core import BlockKind, ContentBlock, ParseError

ARTICLE_HTML = """
<html><body>
<nav><p>Menu</p></nav>
<article>
  <h1>Title <em>here</em></h1>
  <p>First <a href="#">link</a> para.</p>
  <div class="infobox"><p>Info</p></div>
  <div class="copytext__video"><p>Video caption</p><h2>Video title</h2></div>
  <h2>Sub</h2>
  <div class="text"><p>Nested para</p></div>
  <div class="copytext-element-wrapper"><p>Teaser</p></div>
  <h3>Small</h3>
  <h4>Ignored level</h4>
  <div class="external-embed__placeholder"><p>Enable embeds</p></div>
  <div class="meldungsfooter"><p>Footer</p></div>
  <p>Last</p>
</article>
<div class="meldungsfooter"><p>Outside footer</p></div>
</body></html>
"""


def parse(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


def test_extract_blocks_in_document_order():
    """Test headings and paragraphs are extracted in order without excluded fragments."""
    blocks = SelectorContentExtractor().extract(parse(ARTICLE_HTML))

    assert blocks == [
        ContentBlock(BlockKind.HEADING1, "Title here"),
        ContentBlock(BlockKind.PARAGRAPH, "First link para."),
        ContentBlock(BlockKind.HEADING2, "Sub"),
        ContentBlock(BlockKind.PARAGRAPH, "Nested para"),
        ContentBlock(BlockKind.HEADING3, "Small"),
        ContentBlock(BlockKind.PARAGRAPH, "Last"),
    ]


def test_excluded_subtrees_removed_siblings_kept():
    """Test pruning detaches matched subtrees and nothing else."""
    document = parse(ARTICLE_HTML)

    SelectorContentExtractor().extract(document)

    for rule in DEFAULT_REMOVAL_RULES:
        assert document.select(rule.selector) == []
    assert "Video caption" not in document.get_text()
    assert document.find("nav") is not None
    assert document.find("div", class_="text").p.get_text() == "Nested para"
    assert document.find("h4").get_text() == "Ignored level"


def test_text_concatenated_without_separators():
    """Test nested markup contributes only its text."""
    html = "<article><p>a<b>b</b><i>c<span>d</span></i>e</p></article>"

    blocks = SelectorContentExtractor().extract(parse(html))

    assert blocks == [ContentBlock(BlockKind.PARAGRAPH, "abcde")]


def test_missing_container_yields_nothing():
    """Test pages without an article container are skipped."""
    html = "<html><body><main><p>Not an article</p></main></body></html>"

    assert SelectorContentExtractor().extract(parse(html)) == []


def test_container_without_content_yields_nothing():
    """Test an article container without headings or paragraphs."""
    html = "<article><div class='infobox'><p>Only info</p></div><ul><li>item</li></ul></article>"

    assert SelectorContentExtractor().extract(parse(html)) == []


def test_only_first_container_used():
    """Test that later article containers are ignored."""
    html = "<article><p>One</p></article><article><p>Two</p></article>"

    blocks = SelectorContentExtractor().extract(parse(html))

    assert [block.text for block in blocks] == ["One"]


def test_custom_rules_replace_defaults():
    """Test injected rule set is used instead of the defaults."""
    extractor = SelectorContentExtractor(rules=[RemovalRule("ads", ".ad")])
    html = "<article><p class='ad'>Buy</p><div class='infobox'><p>Info</p></div></article>"

    blocks = extractor.extract(parse(html))

    assert [block.text for block in blocks] == ["Info"]


def test_empty_rule_set_removes_nothing():
    html = "<article><div class='infobox'><p>Info</p></div></article>"

    blocks = SelectorContentExtractor(rules=[]).extract(parse(html))

    assert [block.text for block in blocks] == ["Info"]


def test_custom_container_selector():
    """Test a configurable container selector."""
    extractor = SelectorContentExtractor(container_selector="div.story")
    html = "<div class='teaser'><p>Teaser</p></div><div class='story'><h2>Head</h2><p>Body</p></div>"

    blocks = extractor.extract(parse(html))

    assert [block.kind for block in blocks] == [BlockKind.HEADING2, BlockKind.PARAGRAPH]


def test_invalid_rule_selector_raises_parse_error():
    """Test selector construction failures surface as ParseError."""
    with pytest.raises(ParseError, match="broken"):
        SelectorContentExtractor(rules=[RemovalRule("broken", "p[")])


def test_invalid_container_selector_raises_parse_error():
    with pytest.raises(ParseError, match="container"):
        SelectorContentExtractor(container_selector="article[")


def test_paragraphs_without_end_tags_are_separate():
    """Test implicitly closed paragraphs keep their own text only."""
    html = "<html><body><article><p>one<p>two<p>three</article></body></html>"

    blocks = SelectorContentExtractor().extract(parse(html))

    assert [block.text for block in blocks] == ["one", "two", "three"]
