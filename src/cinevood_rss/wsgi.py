"""WSGI entry point: ``gunicorn cinevood_rss.wsgi:app``."""

from cinevood_rss.config import get_settings
from cinevood_rss.logging_setup import configure_logging
from cinevood_rss.web import create_app

settings = get_settings()
configure_logging(settings.log_level)

app = create_app(settings)
