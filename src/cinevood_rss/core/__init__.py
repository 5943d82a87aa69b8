"""Core domain layer."""

from cinevood_rss.core.content_cache import ContentCache
from cinevood_rss.core.entities import (
    LATEST_KEY,
    CacheEntry,
    ContentRecord,
    ExtractionStrategy,
)
from cinevood_rss.core.errors import CinevoodRSSError, ConfigError, FetchError, RenderError
from cinevood_rss.core.interfaces import Extractor, FeedRenderer, Fetcher

__all__ = [
    "LATEST_KEY",
    "CacheEntry",
    "ContentRecord",
    "ExtractionStrategy",
    "ContentCache",
    "CinevoodRSSError",
    "ConfigError",
    "FetchError",
    "RenderError",
    "Extractor",
    "FeedRenderer",
    "Fetcher",
]
