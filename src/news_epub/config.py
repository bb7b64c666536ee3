"""Configuration management."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from news_epub.adapters.extraction import DEFAULT_REMOVAL_RULES, RemovalRule
from news_epub.adapters.extraction.content_extractor import DEFAULT_CONTAINER_SELECTOR
from news_epub.adapters.http_fetch import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from news_epub.core import FeedSource
from news_epub.use_cases import DEFAULT_AUTHOR


class ConfigError(ValueError):
    """Invalid or incomplete configuration."""


@dataclass
class BookConfig:
    """Ebook metadata and destination."""
    author: str = DEFAULT_AUTHOR
    language: str = "en"
    output: Path = Path("tagesschau.epub")


@dataclass
class ExtractionConfig:
    """Article extraction settings."""
    container: str = DEFAULT_CONTAINER_SELECTOR
    exclusions: list[RemovalRule] = field(default_factory=lambda: list(DEFAULT_REMOVAL_RULES))


@dataclass
class HttpConfig:
    """HTTP transport settings."""
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class Settings:
    """Application settings."""

    feeds: list[FeedSource] = field(default_factory=list)
    book: BookConfig = field(default_factory=BookConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    http: HttpConfig = field(default_factory=HttpConfig)

    @property
    def author(self) -> str:
        return self.book.author

    @property
    def output_path(self) -> Path:
        return self.book.output

    @property
    def removal_rules(self) -> list[RemovalRule]:
        return self.extraction.exclusions


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"Top level of {config_path} must be a mapping")
    return config


def _parse_feeds(raw: list) -> list[FeedSource]:
    feeds = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ConfigError(f"Feed #{i + 1} must be a mapping with 'title' and 'url'")
        try:
            feeds.append(FeedSource(title=str(item.get("title", "")), url=str(item.get("url", ""))))
        except ValueError as e:
            raise ConfigError(f"Feed #{i + 1}: {e}") from e
    return feeds


def _parse_rules(raw: list) -> list[RemovalRule]:
    rules = []
    for item in raw:
        if isinstance(item, str):
            rules.append(RemovalRule(name=item, selector=item))
        elif isinstance(item, dict) and item.get("selector"):
            rules.append(RemovalRule(name=item.get("name", item["selector"]), selector=item["selector"]))
        else:
            raise ConfigError(f"Invalid exclusion rule: {item!r}")
    return rules


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config."""
    config = load_config(config_path)

    feeds = _parse_feeds(config.get("feeds") or [])
    if not feeds:
        raise ConfigError(f"No feeds configured in {config_path}")

    settings = Settings(feeds=feeds)

    if "book" in config:
        for key, value in (config["book"] or {}).items():
            setattr(settings.book, key, Path(value) if key == "output" else value)

    if "extraction" in config:
        extraction = config["extraction"] or {}
        if "container" in extraction:
            settings.extraction.container = extraction["container"]
        if "exclusions" in extraction:
            settings.extraction.exclusions = _parse_rules(extraction["exclusions"] or [])

    if "http" in config:
        for key, value in (config["http"] or {}).items():
            setattr(settings.http, key, value)

    return settings
