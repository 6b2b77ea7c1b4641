"""Infrastructure: logging setup."""

from nelsc.infrastructure.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
