"""Tests for the HTTP surface."""

from unittest.mock import AsyncMock
from xml.etree import ElementTree as ET

import pytest

from cinevood_rss.adapters.extract import HtmlExtractor
from cinevood_rss.adapters.feed import RSSFeedRenderer
from cinevood_rss.config import Settings
from cinevood_rss.core import ContentCache, FetchError
from cinevood_rss.use_cases import FeedService
from cinevood_rss.web import create_app

BASE_URL = "https://www.1cinevood.org"


@pytest.fixture
def fetcher():
    return AsyncMock()


def make_client(fetcher, settings=None):
    service = FeedService(
        fetcher=fetcher,
        extractor=HtmlExtractor(),
        cache=ContentCache(ttl=3600),
        renderer=RSSFeedRenderer(site_url=BASE_URL),
        base_url=BASE_URL,
    )
    app = create_app(settings=settings or Settings(), service=service)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def client(fetcher):
    return make_client(fetcher)


def test_index_lists_feeds(client):
    """Test index page links the feed endpoints."""
    response = client.get("/")
    
    assert response.status_code == 200
    assert b"/api/feed?category=bollywood" in response.data


def test_feed_endpoint(client, fetcher, primary_html):
    """Test feed is served as RSS with a self link to the request URL."""
    fetcher.fetch.return_value = primary_html
    
    response = client.get("/api/feed?category=bollywood")
    
    assert response.status_code == 200
    assert response.mimetype == "application/rss+xml"
    channel = ET.fromstring(response.data).find("channel")
    assert channel.findtext("title") == "1Cinevood - Bollywood"
    link = channel.find("{http://www.w3.org/2005/Atom}link")
    assert link.get("href") == "http://localhost/api/feed?category=bollywood"
    fetcher.fetch.assert_awaited_once_with(f"{BASE_URL}/bollywood/")


def test_feed_endpoint_upstream_failure(client, fetcher):
    """Test upstream failure still returns an empty feed, not an error."""
    fetcher.fetch.side_effect = FetchError(BASE_URL, "connection refused")
    
    response = client.get("/api/feed")
    
    assert response.status_code == 200
    assert ET.fromstring(response.data).findall("channel/item") == []


def test_feed_endpoint_render_failure(client, fetcher, monkeypatch):
    """Test render failures map to a plain-text 500."""
    fetcher.fetch.return_value = ""
    service = client.application.extensions["feed_service"]
    monkeypatch.setattr(service, "feed_title", lambda category=None: "")
    
    response = client.get("/api/feed")
    
    assert response.status_code == 500
    assert response.mimetype == "text/plain"
    assert response.data == b"Error generating feed"


def test_cors_header(client, fetcher):
    """Test responses allow any origin."""
    fetcher.fetch.return_value = ""
    
    response = client.get("/api/feed", headers={"Origin": "https://reader.example.com"})
    
    assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_forwarded_headers_ignored_by_default(client, fetcher):
    """Test clients cannot rewrite the self link without a trusted proxy."""
    fetcher.fetch.return_value = ""
    
    response = client.get(
        "/api/feed",
        headers={"X-Forwarded-Host": "attacker.example", "X-Forwarded-Proto": "https"},
    )
    
    link = ET.fromstring(response.data).find("channel/{http://www.w3.org/2005/Atom}link")
    assert link.get("href") == "http://localhost/api/feed"


def test_forwarded_headers_trusted_behind_proxy(fetcher):
    """Test a configured proxy hop supplies the public feed URL."""
    fetcher.fetch.return_value = ""
    settings = Settings()
    settings.server.proxy_hops = 1
    client = make_client(fetcher, settings)
    
    response = client.get(
        "/api/feed",
        headers={"X-Forwarded-Host": "feeds.example.org", "X-Forwarded-Proto": "https"},
    )
    
    link = ET.fromstring(response.data).find("channel/{http://www.w3.org/2005/Atom}link")
    assert link.get("href") == "https://feeds.example.org/api/feed"
