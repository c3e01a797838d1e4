"""
Logger configuration.

Configures the root logger once for the API process.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure Python logging with ISO timestamp and structured format.

    Args:
        level: Root log level name (DEBUG, INFO, WARNING, ...)
    """
    # Remove any existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root_logger.setLevel(logging.getLevelName(level.upper()))
    root_logger.addHandler(handler)

    # Reduce noise from verbose third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("google").setLevel(logging.WARNING)
