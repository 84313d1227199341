"""Logging setup for sysgauge."""

import logging
import sys
from typing import Final, TextIO

LOG_FORMAT: Final[str] = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def resolve_log_level(level_name: str) -> int:
    """Convert a level name such as ``"warning"`` to its numeric value."""
    name = level_name.upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level_name}")
    return getattr(logging, name)


def configure_logging(level_name: str = "WARNING", stream: TextIO | None = None) -> None:
    """
    Send diagnostics to stderr.

    Stdout is reserved for the gauge lines.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=resolve_log_level(level_name), handlers=[handler], force=True)
