"""Logging configuration for gistfolio"""
import logging
import sys

from gistfolio.infrastructure.config.settings import get_settings


def setup_logging(debug: bool | None = None):
    """Configure application-wide logging"""
    if debug is None:
        debug = get_settings().debug
    log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def get_logger(name: str) -> logging.Logger:
    """Get logger for module"""
    return logging.getLogger(name)
