"""Extraction adapters."""

from cinevood_rss.adapters.extract.html_extractor import HtmlExtractor, normalize_url
from cinevood_rss.adapters.extract.selectors import CATEGORY, FALLBACK, PRIMARY, SelectorSet

__all__ = ["HtmlExtractor", "normalize_url", "SelectorSet", "PRIMARY", "FALLBACK", "CATEGORY"]
