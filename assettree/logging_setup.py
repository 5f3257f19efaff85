"""Logging configuration for the command-line entrypoint.

Library modules only create module-level loggers; handlers are installed
here, once, by the CLI.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def resolve_level(level: str | None) -> int:
    """Map a level name to a ``logging`` constant, falling back to WARNING."""
    if not level:
        return logging.WARNING
    value = getattr(logging, level.strip().upper(), None)
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str | None) -> None:
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
