"""RSS 2.0 feed renderer."""

from datetime import datetime, timezone
from email.utils import format_datetime, parsedate_to_datetime
from typing import Callable, Optional, Sequence
from urllib.parse import urlparse
from xml.etree import ElementTree as ET

from cinevood_rss.core import ContentRecord, FeedRenderer, RenderError

ATOM_NS = "http://www.w3.org/2005/Atom"
DC_NS = "http://purl.org/dc/elements/1.1/"

ET.register_namespace("atom", ATOM_NS)
ET.register_namespace("dc", DC_NS)

# Layouts seen in listing cards besides ISO-8601 and RFC 822.
_DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%d %b %Y", "%Y-%m-%d")


def parse_date(value: str) -> Optional[datetime]:
    """Parse a source date string into an aware UTC datetime."""
    text = (value or "").strip()
    if not text:
        return None
    
    parsed: Optional[datetime] = None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        pass
    
    if parsed is None:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            pass
    
    if parsed is None:
        for fmt in _DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue
    
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_rfc822(moment: datetime) -> str:
    """Format an aware datetime the way RSS expects."""
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


class RSSFeedRenderer(FeedRenderer):
    """Render content records as an RSS 2.0 document."""
    
    def __init__(
        self,
        site_url: str,
        image_url: Optional[str] = None,
        language: str = "en",
        ttl_minutes: int = 60,
        default_category: str = "movie",
        author: str = "1cinevood.org",
        image_type: str = "image/jpeg",
        generator: str = "cinevood-rss",
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self.site_url = site_url.rstrip("/")
        self.image_url = image_url or f"{self.site_url}/favicon.ico"
        self.language = language
        self.ttl_minutes = ttl_minutes
        self.default_category = default_category
        self.author = author
        self.image_type = image_type
        self.generator = generator
        self._clock = clock
    
    def render(
        self,
        records: Sequence[ContentRecord],
        title: str,
        description: str,
        feed_url: str,
    ) -> str:
        """Render records into an RSS document string."""
        self._validate(title, feed_url)
        built_at = format_rfc822(self._clock())
        
        rss = ET.Element("rss", {"version": "2.0"})
        channel = ET.SubElement(rss, "channel")
        
        _text(channel, "title", title)
        _text(channel, "description", description or "")
        _text(channel, "link", self.site_url)
        
        image = ET.SubElement(channel, "image")
        _text(image, "url", self.image_url)
        _text(image, "title", title)
        _text(image, "link", self.site_url)
        
        _text(channel, "generator", self.generator)
        _text(channel, "lastBuildDate", built_at)
        ET.SubElement(
            channel,
            f"{{{ATOM_NS}}}link",
            {"href": feed_url, "rel": "self", "type": "application/rss+xml"},
        )
        _text(channel, "pubDate", built_at)
        _text(channel, "language", self.language)
        _text(channel, "ttl", str(self.ttl_minutes))
        
        for record in records:
            self._render_item(channel, record)
        
        ET.indent(rss, space="    ")
        body = ET.tostring(rss, encoding="unicode")
        return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}\n'
    
    def _render_item(self, channel: ET.Element, record: ContentRecord) -> None:
        """Append one <item> for record."""
        item = ET.SubElement(channel, "item")
        _text(item, "title", record.title)
        _text(item, "description", record.description or "")
        _text(item, "link", record.link)
        guid = _text(item, "guid", record.link)
        guid.set("isPermaLink", "true")
        _text(item, "category", record.category or self.default_category)
        _text(item, f"{{{DC_NS}}}creator", self.author)
        
        published = parse_date(record.published_date)
        _text(item, "pubDate", format_rfc822(published) if published else record.published_date)
        
        if record.image_url:
            ET.SubElement(
                item,
                "enclosure",
                {"url": record.image_url, "type": self.image_type, "length": "0"},
            )
    
    @staticmethod
    def _validate(title: str, feed_url: str) -> None:
        if not title or not title.strip():
            raise RenderError("Feed title cannot be empty")
        parsed = urlparse(feed_url or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise RenderError(f"Feed URL must be an absolute http(s) URL: {feed_url!r}")


def _text(parent: ET.Element, tag: str, value: str) -> ET.Element:
    element = ET.SubElement(parent, tag)
    element.text = value
    return element
