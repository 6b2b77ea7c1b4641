"""
Logging setup.

Provides consistent logging across the report and CLI layers. Log records
go to stderr so that report text on stdout stays clean.
"""

import logging
import sys
from typing import Final, Optional

DEFAULT_LEVEL: Final[str] = "WARNING"

LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def setup_logging(
    level: str = DEFAULT_LEVEL,
    format_string: Optional[str] = None
) -> None:
    """
    Setup logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string (uses default if None)

    Raises:
        ValueError: If level is not a known logging level name
    """
    if level.upper() not in LEVELS:
        raise ValueError(f"Unknown logging level: {level!r}")

    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # force: повторный вызов перепривязывает handler к текущему sys.stderr
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get logger for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
