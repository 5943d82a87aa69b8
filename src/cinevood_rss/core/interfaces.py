"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from cinevood_rss.core.entities import ContentRecord


class Fetcher(ABC):
    """Interface for retrieving raw page markup."""
    
    @abstractmethod
    async def fetch(self, url: str) -> str:
        """Return the document at url or raise FetchError."""
        pass


class Extractor(ABC):
    """Interface for turning markup into content records."""
    
    @abstractmethod
    def extract(
        self, document: str, base_url: str, category: Optional[str] = None
    ) -> list[ContentRecord]:
        """Extract records from a raw document."""
        pass


class FeedRenderer(ABC):
    """Interface for serializing records into a feed document."""
    
    @abstractmethod
    def render(
        self,
        records: Sequence[ContentRecord],
        title: str,
        description: str,
        feed_url: str,
    ) -> str:
        """Render records into a feed document."""
        pass
