"""Feed rendering adapters."""

from cinevood_rss.adapters.feed.rss_renderer import RSSFeedRenderer, format_rfc822, parse_date

__all__ = ["RSSFeedRenderer", "format_rfc822", "parse_date"]
