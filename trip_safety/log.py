"""Logger factory shared by the package and the CLI."""

from __future__ import annotations

import logging
import os
import sys


def get_logger(name: str) -> logging.Logger:
    """Return a stdout logger; DEBUG when TRIP_SAFETY_DEBUG is set."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    level = logging.DEBUG if os.getenv("TRIP_SAFETY_DEBUG") else logging.INFO
    logger.setLevel(level)
    return logger
