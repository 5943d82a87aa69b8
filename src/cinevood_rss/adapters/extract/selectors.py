"""CSS selector sets for the site's listing layouts."""

from dataclasses import dataclass

from cinevood_rss.core import ExtractionStrategy


@dataclass(frozen=True)
class SelectorSet:
    """Structural rules for locating listing cards and their fields.
    
    Each field selector may be a comma-separated group; the first matching
    element in document order wins.
    """
    
    card: str
    title: str
    description: str
    date: str
    link: str = "a[href]"
    image: str = "img"


PRIMARY = SelectorSet(
    card=".movies-list .movie-item",
    title=".movie-title",
    description=".movie-excerpt",
    date=".movie-date",
)

FALLBACK = SelectorSet(
    card=".content-area article",
    title="h2",
    description=".entry-content p",
    date=".published",
)


def union(*sets: SelectorSet) -> SelectorSet:
    """Combine selector sets so one pass matches any of their layouts."""
    
    def join(selectors: list[str]) -> str:
        unique: list[str] = []
        for selector in selectors:
            if selector not in unique:
                unique.append(selector)
        return ", ".join(unique)
    
    return SelectorSet(
        card=join([s.card for s in sets]),
        title=join([s.title for s in sets]),
        description=join([s.description for s in sets]),
        date=join([s.date for s in sets]),
        link=join([s.link for s in sets]),
        image=join([s.image for s in sets]),
    )


CATEGORY = union(PRIMARY, FALLBACK)

SELECTOR_SETS: dict[ExtractionStrategy, SelectorSet] = {
    ExtractionStrategy.PRIMARY: PRIMARY,
    ExtractionStrategy.FALLBACK: FALLBACK,
    ExtractionStrategy.CATEGORY: CATEGORY,
}

# Strategies tried in order for the unfiltered listing; the first that yields
# records wins.
LISTING_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    ExtractionStrategy.PRIMARY,
    ExtractionStrategy.FALLBACK,
)
