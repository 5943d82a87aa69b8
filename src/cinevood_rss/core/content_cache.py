"""In-process TTL cache for extracted records."""

import logging
import time
from typing import Awaitable, Callable, Iterable, Optional

from cinevood_rss.core.entities import CacheEntry, ContentRecord

logger = logging.getLogger(__name__)

Producer = Callable[[], Awaitable[Iterable[ContentRecord]]]


class ContentCache:
    """Keyed store of immutable record snapshots with a fixed TTL.
    
    Entries are replaced wholesale on refresh. Concurrent misses for the same
    key may each run the producer; the last one to finish wins.
    """
    
    def __init__(
        self,
        ttl: float,
        empty_ttl: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize cache.
        
        Args:
            ttl: Seconds an entry stays servable.
            empty_ttl: Seconds an empty result stays servable. Defaults to ttl.
            clock: Monotonic time source, injectable for tests.
        """
        if ttl <= 0:
            raise ValueError("TTL must be positive")
        if empty_ttl is not None and empty_ttl <= 0:
            raise ValueError("Empty-result TTL must be positive")
        self.ttl = ttl
        self.empty_ttl = empty_ttl if empty_ttl is not None else ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
    
    async def resolve(self, key: str, producer: Producer) -> tuple[ContentRecord, ...]:
        """Return cached records for key, producing and storing them on a miss."""
        entry = self.get(key)
        if entry is not None:
            logger.debug("Cache hit for %s (%d records)", key, len(entry.records))
            return entry.records
        
        logger.debug("Cache miss for %s", key)
        self.prune()
        records = tuple(await producer())
        
        ttl = self.ttl if records else self.empty_ttl
        self._entries[key] = CacheEntry(
            key=key,
            records=records,
            stored_at=self._clock(),
            ttl=ttl,
        )
        logger.info("Cached %d records for %s", len(records), key)
        return records
    
    def get(self, key: str) -> Optional[CacheEntry]:
        """Return the entry for key if it is still valid."""
        entry = self._entries.get(key)
        if entry is None or not entry.is_valid(self._clock()):
            return None
        return entry
    
    def invalidate(self, key: Optional[str] = None) -> None:
        """Drop one entry, or every entry when key is None."""
        if key is None:
            self._entries.clear()
        else:
            self._entries.pop(key, None)
    
    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None
    
    def prune(self) -> int:
        """Drop expired entries and return how many were removed."""
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if not entry.is_valid(now)]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Pruned %d expired cache entries", len(expired))
        return len(expired)
    
    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for entry in self._entries.values() if entry.is_valid(now))
