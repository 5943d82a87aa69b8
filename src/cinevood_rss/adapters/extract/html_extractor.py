"""BeautifulSoup extractor for listing pages."""

import logging
import re
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from cinevood_rss.adapters.extract.selectors import (
    LISTING_STRATEGIES,
    SELECTOR_SETS,
    SelectorSet,
)
from cinevood_rss.core import ContentRecord, ExtractionStrategy, Extractor

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_url(value: str, base_url: str) -> str:
    """Prefix base_url unless value already carries an http(s) scheme."""
    if _SCHEME_RE.match(value):
        return value
    return f"{base_url}{value}"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class HtmlExtractor(Extractor):
    """Extract content records from listing markup."""
    
    def __init__(
        self,
        selector_sets: Optional[dict[ExtractionStrategy, SelectorSet]] = None,
        listing_strategies: Iterable[ExtractionStrategy] = LISTING_STRATEGIES,
        now: Callable[[], str] = _utc_now_iso,
    ) -> None:
        self.selector_sets = selector_sets or SELECTOR_SETS
        self.listing_strategies = tuple(listing_strategies)
        self._now = now
    
    def extract(
        self, document: str, base_url: str, category: Optional[str] = None
    ) -> list[ContentRecord]:
        """Extract records from document.
        
        Without a category the listing strategies are tried in order and the
        first non-empty result is returned. With a category the union selector
        set runs once and every record is stamped with the category.
        """
        soup = BeautifulSoup(document or "", "html.parser")
        base_url = base_url.rstrip("/")
        
        if category:
            return self._apply(soup, ExtractionStrategy.CATEGORY, base_url, category)
        
        for strategy in self.listing_strategies:
            records = self._apply(soup, strategy, base_url)
            if records:
                logger.debug("Strategy %s matched %d records", strategy.value, len(records))
                return records
            logger.debug("Strategy %s matched nothing", strategy.value)
        
        return []
    
    def _apply(
        self,
        soup: BeautifulSoup,
        strategy: ExtractionStrategy,
        base_url: str,
        category: Optional[str] = None,
    ) -> list[ContentRecord]:
        """Run one selector set over the document."""
        selectors = self.selector_sets[strategy]
        records: list[ContentRecord] = []
        
        for card in soup.select(selectors.card):
            record = self._parse_card(card, selectors, base_url, category)
            if record is not None:
                records.append(record)
        
        return records
    
    def _parse_card(
        self,
        card: Tag,
        selectors: SelectorSet,
        base_url: str,
        category: Optional[str],
    ) -> Optional[ContentRecord]:
        """Pull fields from one card; None when title or link is missing."""
        title = self._text(card, selectors.title)
        link = self._attr(card, selectors.link, "href")
        
        if not title or not link:
            logger.debug("Skipping card without title or link: %r", title or link)
            return None
        
        image = self._attr(card, selectors.image, "src") or self._attr(
            card, selectors.image, "data-src"
        )
        
        return ContentRecord(
            title=title,
            link=normalize_url(link, base_url),
            image_url=normalize_url(image, base_url) if image else None,
            description=self._text(card, selectors.description),
            published_date=self._text(card, selectors.date) or self._now(),
            category=category,
        )
    
    @staticmethod
    def _text(card: Tag, selector: str) -> str:
        """Collapsed text of the first element matching selector."""
        element = card.select_one(selector)
        if element is None:
            return ""
        return _WHITESPACE_RE.sub(" ", element.get_text(" ")).strip()
    
    @staticmethod
    def _attr(card: Tag, selector: str, name: str) -> str:
        """Trimmed attribute of the first element matching selector."""
        element = card.select_one(selector)
        if element is None:
            return ""
        value = element.get(name)
        if isinstance(value, list):
            value = " ".join(value)
        return (value or "").strip()
