"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

import yaml

from cinevood_rss.adapters.fetch.http_fetcher import DEFAULT_USER_AGENT
from cinevood_rss.core import ConfigError


@dataclass
class SiteConfig:
    """Source site settings."""
    base_url: str = "https://www.1cinevood.org"
    request_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT


@dataclass
class CacheConfig:
    """Record cache settings."""
    ttl_seconds: float = 60 * 60
    empty_ttl_seconds: Optional[float] = None


@dataclass
class FeedConfig:
    """Feed metadata settings."""
    site_name: str = "1Cinevood"
    language: str = "en"
    ttl_minutes: int = 60
    default_category: str = "movie"
    author: str = "1cinevood.org"
    image_type: str = "image/jpeg"
    image_url: Optional[str] = None


@dataclass
class ServerConfig:
    """HTTP listener settings."""
    host: str = "0.0.0.0"
    port: int = 3000
    # Reverse proxies in front of the app whose X-Forwarded-* headers are trusted
    proxy_hops: int = 0


@dataclass
class Settings:
    """Application settings."""

    environment: str = "development"
    log_level: str = "INFO"

    # Config sections
    site: SiteConfig = field(default_factory=SiteConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    feed: FeedConfig = field(default_factory=FeedConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @property
    def base_url(self) -> str:
        return self.site.base_url.rstrip("/")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate(self) -> None:
        """Reject values the pipeline cannot run with."""
        parsed = urlparse(self.site.base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConfigError(f"site.base_url must be an absolute http(s) URL: {self.site.base_url!r}")
        if self.cache.ttl_seconds <= 0:
            raise ConfigError("cache.ttl_seconds must be positive")
        if self.cache.empty_ttl_seconds is not None and self.cache.empty_ttl_seconds <= 0:
            raise ConfigError("cache.empty_ttl_seconds must be positive")
        if self.site.request_timeout <= 0:
            raise ConfigError("site.request_timeout must be positive")
        if not 0 < self.server.port < 65536:
            raise ConfigError(f"server.port out of range: {self.server.port}")
        if self.server.proxy_hops < 0:
            raise ConfigError("server.proxy_hops cannot be negative")


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _env_number(name: str, cast: type) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    try:
        return cast(value)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {value!r}") from e


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    # Load YAML config
    config = load_config(config_path)

    settings = Settings()

    # Apply YAML config
    for section in ("site", "cache", "feed", "server"):
        if section in config:
            target = getattr(settings, section)
            for key, value in (config[section] or {}).items():
                if not hasattr(target, key):
                    raise ConfigError(f"Unknown setting {section}.{key}")
                setattr(target, key, value)

    if "environment" in config:
        settings.environment = str(config["environment"])
    if "log_level" in config:
        settings.log_level = str(config["log_level"])

    # Environment overrides
    settings.environment = os.getenv("APP_ENV", settings.environment)
    settings.log_level = os.getenv("LOG_LEVEL", settings.log_level).upper()
    settings.site.base_url = os.getenv("CINEVOOD_BASE_URL", settings.site.base_url)

    port = _env_number("PORT", int)
    if port is not None:
        settings.server.port = port

    proxy_hops = _env_number("TRUSTED_PROXY_HOPS", int)
    if proxy_hops is not None:
        settings.server.proxy_hops = proxy_hops

    ttl = _env_number("CINEVOOD_CACHE_TTL", float)
    if ttl is not None:
        settings.cache.ttl_seconds = ttl

    settings.validate()
    return settings
