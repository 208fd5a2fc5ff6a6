"""Logging configuration helpers."""

from __future__ import annotations

import logging


def configure_logging(level: int | str = logging.WARNING) -> None:
    """
    Configure logging with a consistent format for the command line tool.

    *level* may be a level number or a name such as ``"debug"``.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", force=True)
