# /app/core/logging_config.py

import logging

from . import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = config.LOG_LEVEL) -> None:
    """Configures the root logger once for the whole application."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    # httpx logs every request at INFO; keep provider traffic out of the app log.
    logging.getLogger("httpx").setLevel(logging.WARNING)
