"""Core domain entities."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

LATEST_KEY = "__latest__"


class ExtractionStrategy(str, Enum):
    """Named selector strategies.
    
    PRIMARY and FALLBACK form the listing order; CATEGORY runs alone.
    """
    
    PRIMARY = "primary"
    FALLBACK = "fallback"
    CATEGORY = "category"


@dataclass(frozen=True)
class ContentRecord:
    """One listing item discovered on the site."""
    
    title: str
    link: str
    published_date: str
    description: str = ""
    image_url: Optional[str] = None
    category: Optional[str] = None
    
    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise ValueError("Title cannot be empty")
        if not self.link or not self.link.strip():
            raise ValueError("Link cannot be empty")


@dataclass(frozen=True)
class CacheEntry:
    """Records stored for one cache key."""
    
    key: str
    records: tuple[ContentRecord, ...]
    stored_at: float
    ttl: float
    
    def is_valid(self, now: float) -> bool:
        """Entry is servable while younger than its TTL."""
        return now - self.stored_at < self.ttl
