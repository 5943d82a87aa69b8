"""Shared fixtures for cinevood-rss tests."""

import logging

import pytest

PRIMARY_HTML = """
<html><body>
<div class="movies-list">
  <div class="movie-item">
    <a href="/movie-one/"><img src="/wp-content/one.jpg"></a>
    <h3 class="movie-title"> Movie One (2024) </h3>
    <div class="movie-excerpt">First   movie excerpt</div>
    <span class="movie-date">January 5, 2024</span>
  </div>
  <div class="movie-item">
    <a href="https://www.1cinevood.org/movie-two/"><img src="https://cdn.example.com/two.jpg"></a>
    <h3 class="movie-title">Movie Two</h3>
  </div>
</div>
<div class="content-area">
  <article><h2>Fallback Article</h2><a href="/fallback/">Read</a></article>
</div>
</body></html>
"""

FALLBACK_HTML = """
<html><body>
<div class="content-area">
  <article>
    <h2><a href="/web-series-one/">Web Series One</a></h2>
    <img data-src="/lazy/one.jpg">
    <div class="entry-content"><p>Season one.</p><p>Second paragraph.</p></div>
    <time class="published">2024-02-10T08:30:00+00:00</time>
  </article>
  <article>
    <h2>No Link Here</h2>
  </article>
</div>
</body></html>
"""


@pytest.fixture
def primary_html() -> str:
    return PRIMARY_HTML


@pytest.fixture
def fallback_html() -> str:
    return FALLBACK_HTML


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host environment overrides out of settings."""
    for name in ("PORT", "APP_ENV", "LOG_LEVEL", "CINEVOOD_BASE_URL", "CINEVOOD_CACHE_TTL", "TRUSTED_PROXY_HOPS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_logging():
    """Put the root logger back after code that reconfigures it."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
