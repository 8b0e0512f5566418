"""
Logging configuration for geolink.

Every module obtains its logger through ``get_logger(__name__)`` so that
resolver diagnostics share one format and one level setting.
"""

import logging
import sys


def _configured_level() -> int:
    """Read the level from settings, falling back to WARNING."""
    from geolink.config.settings import get_settings

    level_name = get_settings().LOG_LEVEL
    return getattr(logging, level_name, logging.WARNING)


def setup_logger(name: str, level: int = None) -> logging.Logger:
    """
    Configure a logger with consistent formatting.

    Handles two scenarios:
    1. An application installed a RichHandler on the root logger.
       We detect this and let logs propagate to root (single output).
    2. Direct usage: No RichHandler on root. We add our own StreamHandler
       and disable propagation to prevent duplicate output.

    Args:
        name: Name of the logger
        level: Logging level (default: GEOLINK_LOG_LEVEL)

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(level if level is not None else _configured_level())

        from rich.logging import RichHandler

        root_logger = logging.getLogger()
        has_rich_handler = any(
            isinstance(handler, RichHandler) for handler in root_logger.handlers
        )

        if not has_rich_handler:
            handler = logging.StreamHandler(sys.stdout)
            formatter = logging.Formatter(
                "[%(asctime)s] %(levelname)s - [%(name)s] - %(message)s"
            )
            handler.setFormatter(formatter)
            logger.addHandler(handler)
            # Root may carry a basicConfig handler that would repeat the record
            logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the given name.

    Args:
        name: Name of the logger

    Returns:
        logging.Logger: Logger instance
    """
    return setup_logger(name)
