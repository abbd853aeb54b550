"""Logging utilities."""

import logging
from typing import Optional, TextIO

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEBUG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(filename)s:%(lineno)d - %(message)s"
)


class ConditionalFormatter(logging.Formatter):
    """Formatter that adds the source location to DEBUG records only."""

    def __init__(self, datefmt: str = "%H:%M:%S"):
        """Initialize the formatter."""
        super().__init__(fmt=DEFAULT_FORMAT, datefmt=datefmt)
        self._debug_formatter = logging.Formatter(
            fmt=DEBUG_FORMAT, datefmt=datefmt
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format the record, delegating DEBUG records to the verbose format."""
        if record.levelno <= logging.DEBUG:
            return self._debug_formatter.format(record)
        return super().format(record)


def setup_logging(
    level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> None:
    """Configure the transformime logger.

    Args:
        level: The logging level to set (default: WARNING)
        stream: Stream to log to (default: stderr)
    """
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ConditionalFormatter())
    logger = logging.getLogger("transformime")
    logger.handlers = [handler]
    logger.setLevel(level)
    logger.propagate = False
