"""Tests for the content cache."""

from unittest.mock import AsyncMock

import pytest

from cinevood_rss.core import LATEST_KEY, ContentCache, ContentRecord


class FakeClock:
    """Manually advanced monotonic clock."""
    
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
    
    def __call__(self) -> float:
        return self.now
    
    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_record(title: str) -> ContentRecord:
    return ContentRecord(
        title=title,
        link=f"https://www.1cinevood.org/{title.lower()}/",
        published_date="2024-01-01",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> ContentCache:
    return ContentCache(ttl=3600, clock=clock)


@pytest.mark.asyncio
async def test_hit_within_ttl_skips_producer(cache, clock):
    """Test two resolutions within TTL call the producer once."""
    producer = AsyncMock(return_value=[make_record("One"), make_record("Two")])
    
    first = await cache.resolve(LATEST_KEY, producer)
    clock.advance(3599)
    second = await cache.resolve(LATEST_KEY, producer)
    
    assert first == second
    assert [r.title for r in second] == ["One", "Two"]
    producer.assert_awaited_once()


@pytest.mark.asyncio
async def test_expired_entry_is_refreshed(cache, clock):
    """Test resolution at TTL expiry produces again and replaces the entry."""
    producer = AsyncMock(side_effect=[[make_record("Old")], [make_record("New")]])
    
    await cache.resolve("bollywood", producer)
    clock.advance(3600)
    refreshed = await cache.resolve("bollywood", producer)
    
    assert [r.title for r in refreshed] == ["New"]
    assert producer.await_count == 2
    assert cache.get("bollywood").stored_at == clock.now


@pytest.mark.asyncio
async def test_empty_result_is_cached(cache, clock):
    """Test an empty producer result is stored like any other."""
    producer = AsyncMock(return_value=[])
    
    assert await cache.resolve(LATEST_KEY, producer) == ()
    clock.advance(60)
    assert await cache.resolve(LATEST_KEY, producer) == ()
    
    producer.assert_awaited_once()
    assert LATEST_KEY in cache


@pytest.mark.asyncio
async def test_empty_ttl_shortens_empty_results(clock):
    """Test empty results expire after the shorter empty TTL."""
    cache = ContentCache(ttl=3600, empty_ttl=300, clock=clock)
    producer = AsyncMock(side_effect=[[], [make_record("Back")]])
    
    await cache.resolve(LATEST_KEY, producer)
    clock.advance(300)
    records = await cache.resolve(LATEST_KEY, producer)
    
    assert [r.title for r in records] == ["Back"]
    assert cache.get(LATEST_KEY).ttl == 3600


@pytest.mark.asyncio
async def test_keys_are_independent(cache):
    """Test each key keeps its own entry."""
    latest = AsyncMock(return_value=[make_record("Latest")])
    hollywood = AsyncMock(return_value=[make_record("Hollywood")])
    
    await cache.resolve(LATEST_KEY, latest)
    result = await cache.resolve("hollywood", hollywood)
    
    assert [r.title for r in result] == ["Hollywood"]
    assert len(cache) == 2


@pytest.mark.asyncio
async def test_invalidate(cache):
    """Test invalidation forces the producer to run again."""
    producer = AsyncMock(return_value=[make_record("One")])
    
    await cache.resolve("hollywood", producer)
    cache.invalidate("hollywood")
    await cache.resolve("hollywood", producer)
    assert producer.await_count == 2
    
    cache.invalidate()
    assert len(cache) == 0


def test_rejects_non_positive_ttl():
    """Test TTL must be positive."""
    with pytest.raises(ValueError):
        ContentCache(ttl=0)
    with pytest.raises(ValueError):
        ContentCache(ttl=10, empty_ttl=-1)


@pytest.mark.asyncio
async def test_expired_entries_pruned_on_miss(cache, clock):
    """Test distinct keys do not pile up once their entries expire."""
    producer = AsyncMock(return_value=[make_record("One")])
    
    for i in range(1000):
        await cache.resolve(f"category-{i}", producer)
        clock.advance(3600)
    
    assert len(cache._entries) == 1
    assert len(cache) == 0


@pytest.mark.asyncio
async def test_len_counts_only_valid_entries(cache, clock):
    """Test len agrees with membership after expiry."""
    producer = AsyncMock(return_value=[make_record("One")])
    
    await cache.resolve("hollywood", producer)
    clock.advance(1800)
    await cache.resolve("bollywood", producer)
    assert len(cache) == 2
    
    clock.advance(1800)
    assert "hollywood" not in cache
    assert len(cache) == 1
    assert cache.prune() == 1
