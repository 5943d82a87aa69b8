"""Scrape 1Cinevood listings and publish them as an RSS feed."""

__version__ = "0.1.0"
