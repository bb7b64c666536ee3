"""Publication-time filtering of feed entries."""

from news_epub.core.entities import FeedEntry, TimeWindow


def is_in_window(entry: FeedEntry, window: TimeWindow) -> bool:
    """
    Check whether an entry belongs to the time window.

    Entries without a publication timestamp always pass.
    """
    if entry.published_at is None:
        return True
    return window.contains(entry.published_at)


def filter_entries(entries: list[FeedEntry], window: TimeWindow) -> list[FeedEntry]:
    """Keep entries published within ``window``, preserving feed order."""
    return [entry for entry in entries if is_in_window(entry, window)]
