"""Logging setup shared by the CLI and the Streamlit app."""

import logging

from sugoroku.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger from settings. Debug mode forces DEBUG."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("sugoroku").setLevel(level)
