"""CLI entry point for cinevood-rss."""

import asyncio
import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlencode

import typer

from cinevood_rss.config import get_settings
from cinevood_rss.core import CinevoodRSSError
from cinevood_rss.logging_setup import configure_logging
from cinevood_rss.use_cases import FeedService, normalize_category

logger = logging.getLogger(__name__)

cli = typer.Typer(help="Scrape 1Cinevood listings and serve them as RSS.")


@cli.command()
def feed(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Category path, e.g. bollywood"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the feed to this file"),
    feed_url: Optional[str] = typer.Option(None, "--feed-url", help="Canonical URL of the feed"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="YAML config file"),
) -> None:
    """Render a feed once and print it (or save it)."""
    settings = get_settings(config)
    configure_logging(settings.log_level)

    category = normalize_category(category)
    service = FeedService.from_settings(settings)
    if feed_url is None:
        feed_url = f"http://localhost:{settings.server.port}/api/feed"
        if category:
            feed_url += "?" + urlencode({"category": category})

    try:
        body = asyncio.run(service.build_feed(feed_url=feed_url, category=category))
    except CinevoodRSSError as e:
        logger.error("Error generating feed: %s", e)
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(body, nl=False)
    else:
        service.save_feed(body, output)


@cli.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Interface to bind"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to bind (defaults to PORT)"),
    config: Path = typer.Option(Path("config.yaml"), "--config", help="YAML config file"),
) -> None:
    """Run the HTTP API with Flask's built-in server."""
    from cinevood_rss.web import create_app

    settings = get_settings(config)
    configure_logging(settings.log_level)

    if settings.is_production:
        logger.info("APP_ENV=production: not binding a listener, use a WSGI server with create_app()")
        return

    app = create_app(settings)
    bind_host = host or settings.server.host
    bind_port = port or settings.server.port
    logger.info("Server running on port %d", bind_port)
    app.run(host=bind_host, port=bind_port)


def app() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    app()
