"""Error taxonomy for the feed pipeline."""

from typing import Optional


class CinevoodRSSError(Exception):
    """Base class for all pipeline errors."""


class ConfigError(CinevoodRSSError):
    """Raised when configuration values are invalid."""


class FetchError(CinevoodRSSError):
    """Raised when a page cannot be retrieved."""
    
    def __init__(self, url: str, reason: str, status_code: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status_code = status_code
        if status_code is not None:
            message = f"Failed to fetch {url}: HTTP {status_code} ({reason})"
        else:
            message = f"Failed to fetch {url}: {reason}"
        super().__init__(message)


class RenderError(CinevoodRSSError):
    """Raised when feed metadata is structurally invalid."""
