"""Business logic use cases."""

import logging
from pathlib import Path
from typing import Optional

from cinevood_rss.adapters.extract import HtmlExtractor
from cinevood_rss.adapters.feed import RSSFeedRenderer
from cinevood_rss.adapters.fetch import HttpFetcher
from cinevood_rss.config import Settings
from cinevood_rss.core import (
    LATEST_KEY,
    ContentCache,
    ContentRecord,
    Extractor,
    FeedRenderer,
    FetchError,
    Fetcher,
)

logger = logging.getLogger(__name__)


def normalize_category(category: Optional[str]) -> Optional[str]:
    """Trim a requested category; blank means the unfiltered listing."""
    if category is None:
        return None
    category = category.strip()
    return category or None


class FeedService:
    """Resolve records through the cache and render them as a feed."""

    def __init__(
        self,
        fetcher: Fetcher,
        extractor: Extractor,
        cache: ContentCache,
        renderer: FeedRenderer,
        base_url: str,
        site_name: str = "1Cinevood",
    ) -> None:
        self.fetcher = fetcher
        self.extractor = extractor
        self.cache = cache
        self.renderer = renderer
        self.base_url = base_url.rstrip("/")
        self.site_name = site_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "FeedService":
        """Wire the default adapters from settings."""
        fetcher = HttpFetcher(
            timeout=settings.site.request_timeout,
            user_agent=settings.site.user_agent,
        )
        cache = ContentCache(
            ttl=settings.cache.ttl_seconds,
            empty_ttl=settings.cache.empty_ttl_seconds,
        )
        renderer = RSSFeedRenderer(
            site_url=settings.base_url,
            image_url=settings.feed.image_url,
            language=settings.feed.language,
            ttl_minutes=settings.feed.ttl_minutes,
            default_category=settings.feed.default_category,
            author=settings.feed.author,
            image_type=settings.feed.image_type,
        )
        return cls(
            fetcher=fetcher,
            extractor=HtmlExtractor(),
            cache=cache,
            renderer=renderer,
            base_url=settings.base_url,
            site_name=settings.feed.site_name,
        )

    def source_url(self, category: Optional[str] = None) -> str:
        """Listing page URL for the category, or the home page."""
        if category:
            return f"{self.base_url}/{category}/"
        return self.base_url

    def feed_title(self, category: Optional[str] = None) -> str:
        if category:
            return f"{self.site_name} - {category[0].upper()}{category[1:]}"
        return f"{self.site_name} - Latest Content"

    def feed_description(self, category: Optional[str] = None) -> str:
        if category:
            return f"Latest {category} content from {self.site_name}"
        return f"Latest content from {self.site_name}"

    async def get_records(self, category: Optional[str] = None) -> tuple[ContentRecord, ...]:
        """Return records for the category, served from cache when fresh.

        Fetch and extraction failures degrade to an empty result, which is
        cached like any other.
        """
        category = normalize_category(category)
        key = category or LATEST_KEY

        async def produce() -> list[ContentRecord]:
            return await self._scrape(category)

        return await self.cache.resolve(key, produce)

    async def build_feed(self, feed_url: str, category: Optional[str] = None) -> str:
        """Render the feed document for the category.

        Raises:
            RenderError: If the feed metadata is invalid.
        """
        category = normalize_category(category)
        records = await self.get_records(category)
        return self.renderer.render(
            records,
            title=self.feed_title(category),
            description=self.feed_description(category),
            feed_url=feed_url,
        )

    def save_feed(self, feed: str, output_path: Path) -> None:
        """Save feed to file."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(feed, encoding="utf-8")
        logger.info("Feed saved to %s", output_path)

    async def _scrape(self, category: Optional[str]) -> list[ContentRecord]:
        """Fetch and extract one listing page, never raising."""
        url = self.source_url(category)

        try:
            document = await self.fetcher.fetch(url)
        except FetchError as e:
            logger.warning("Error scraping %s: %s", url, e)
            return []

        try:
            records = self.extractor.extract(document, self.base_url, category)
        except Exception:
            logger.exception("Error extracting records from %s", url)
            return []

        logger.info("Extracted %d records from %s", len(records), url)
        return records
