"""Logging setup for the userdir command line.

Records go to stderr so they never mix with command output on stdout.
"""

from __future__ import annotations

import logging


def setup_logging(level: str = "WARNING") -> None:
    """Configure the root logger once.

    Unknown level names fall back to WARNING. Calling this again only
    adjusts the level.
    """
    logger = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logger.setLevel(numeric_level)

    if logger.handlers:
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
