"""HTTP surface for the feed pipeline."""

import logging
from typing import Optional

from flask import Flask, Response, request
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from cinevood_rss.config import Settings, get_settings
from cinevood_rss.use_cases import FeedService

logger = logging.getLogger(__name__)

RSS_MIMETYPE = "application/rss+xml"

INDEX_HTML = """<h1>{site_name} RSS API</h1>
<p>Available endpoints:</p>
<ul>
  <li><a href="/api/feed">/api/feed</a> - Latest content</li>
  <li><a href="/api/feed?category=bollywood">/api/feed?category=bollywood</a> - Bollywood movies</li>
  <li><a href="/api/feed?category=hollywood">/api/feed?category=hollywood</a> - Hollywood movies</li>
  <li><a href="/api/feed?category=web-series">/api/feed?category=web-series</a> - Web Series</li>
</ul>
"""


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[FeedService] = None,
) -> Flask:
    """Build the Flask app around one shared FeedService."""
    settings = settings or get_settings()
    service = service or FeedService.from_settings(settings)

    app = Flask(__name__)
    hops = settings.server.proxy_hops
    if hops:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops, x_prefix=hops)
    CORS(app, resources={r"/*": {"origins": "*"}}, send_wildcard=True)
    app.extensions["feed_service"] = service

    @app.route("/", methods=["GET"])
    def index():
        return INDEX_HTML.format(site_name=service.site_name)

    @app.route("/api/feed", methods=["GET"])
    async def feed():
        category = request.args.get("category")
        try:
            body = await service.build_feed(feed_url=request.url, category=category)
        except Exception:
            logger.exception("Error generating feed")
            return Response("Error generating feed", status=500, mimetype="text/plain")
        return Response(body, status=200, mimetype=RSS_MIMETYPE)

    @app.errorhandler(500)
    def internal_error(error):
        logger.error("Unhandled error: %s", error)
        return Response("Something broke!", status=500, mimetype="text/plain")

    return app
