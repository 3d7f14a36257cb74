"""
Logging setup for the todo backend package.
"""

import logging
from typing import Optional

from .settings import LoggingConfig, app_config

PACKAGE_LOGGER = "todo_backend"


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the package logger with a console handler.

    Safe to call more than once: the handler is added only on the first call,
    later calls just apply the configured level.

    Args:
        config (Optional[LoggingConfig]): Level and format. Defaults to the
                                          application logging config.

    Returns:
        logging.Logger: The configured package logger.
    """
    config = config or app_config.logging
    level = getattr(logging, config.level.upper())

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not getattr(logger, "_todo_logging_configured", False):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(handler)
        logger._todo_logging_configured = True

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
