"""Adapters for fetching, extracting and rendering."""
