"""ASGI entrypoint for the DJ wishboard API."""

from dj_wishboard.api.app import create_app
from dj_wishboard.app_logging import configure_logging
from dj_wishboard.config import Settings
from dj_wishboard.containers import build_container

settings = Settings()
configure_logging(settings.log_level)
app = create_app(build_container(settings))
