"""
Logging configuration for the application.

Sets up structured logging with a consistent format.
Logging must not change program behavior.
Never logs request bodies or response payloads.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEV_LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"
)
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO", environment: str = "production") -> None:
    """Configure structured logging for the application.

    Development logs carry the source line of each record.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        environment: "development" or "production".
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=DEV_LOG_FORMAT if environment == "development" else LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
