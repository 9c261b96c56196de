"""
Mini Games - Logging Configuration
"""

import logging

from src.config.settings import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings | None = None) -> None:
    """Configure the root logger from settings. DEBUG wins when ``debug`` is set."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist; the level still applies.
    logging.getLogger().setLevel(level)
    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(level))
