"""Logging configuration for the quake_viz package.

Streamlit owns the root logger and re-executes the app script on every widget
interaction, so configuration is scoped to the ``quake_viz`` logger and is safe to
repeat: each call replaces the handler installed by the previous one.
"""

import logging
import sys

from .config import get_settings

PACKAGE_LOGGER = "quake_viz"
_HANDLER_NAME = "quake_viz.stdout"


def configure_logging(
    level: str | None = None, format_string: str | None = None
) -> logging.Logger:
    """Configure the package logger.

    Arguments passed to the function win over the configured settings.

    Args:
        level: Optional logging level (e.g., "DEBUG", "INFO").
        format_string: Optional logging format string.

    Returns:
        The configured ``quake_viz`` logger.
    """
    settings = get_settings()

    log_level = (level or settings.logging.level).upper()
    log_format = format_string or settings.logging.format

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(log_format))
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, log_level, logging.INFO))

    # requests logs every connection to the feed at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    package_logger.debug("Logging configured with level: %s", log_level)
    return package_logger
