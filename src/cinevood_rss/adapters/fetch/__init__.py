"""Fetch adapters."""

from cinevood_rss.adapters.fetch.http_fetcher import HttpFetcher

__all__ = ["HttpFetcher"]
