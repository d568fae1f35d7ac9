"""
Application-wide logging setup.

Every module gets its logger with ``logging.getLogger(__name__)``; this module
only decides the format and level, once, when the app is built.
"""

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure the root logger.

    Parameters:
        level (str): "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"

    Logs go to stderr, which uvicorn leaves alone, so request logs and ours
    end up in the same stream.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    logging.getLogger(__name__).info("Logging initialized with level %s", level)
