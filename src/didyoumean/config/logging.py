"""Logging configuration"""

import logging

from ..consts import PACKAGE_NAME


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Configure logging for applications embedding the matcher.

    The library never calls this on import; it only emits records on its
    named loggers.
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,  # Override any existing configuration
    )
    return logging.getLogger(PACKAGE_NAME)
