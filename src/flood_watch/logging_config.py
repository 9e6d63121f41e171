"""Centralized logging configuration."""

import logging
from typing import Optional

from flood_watch.config import DEBUG

# Third-party loggers that get their own handler instead of propagating
THIRD_PARTY_LOGGERS = [
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "fastapi",
]


def configure_logging(level: Optional[int] = None):
    """
    Configure a consistent logging format for the flood watch service.

    Args:
        level: Root log level. Defaults to DEBUG when the DEBUG setting is on, INFO otherwise.
    """
    if level is None:
        level = logging.DEBUG if DEBUG else logging.INFO

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    for logger_name in THIRD_PARTY_LOGGERS:
        logger = logging.getLogger(logger_name)
        # httpx logs every request at INFO, one per location per refresh
        logger.setLevel(logging.WARNING if logger_name == "httpx" else logging.INFO)

        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        # Don't propagate to avoid duplicate messages
        logger.propagate = False

        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
