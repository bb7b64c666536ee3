"""Article page scraping."""

from news_epub.adapters.scraper.article_scraper import ArticleScraper

__all__ = ["ArticleScraper"]
