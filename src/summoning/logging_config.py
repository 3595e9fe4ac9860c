"""Logging setup for command-line entry points.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are installed here, once, by whatever program embeds the game.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING") -> None:
    """Install a stderr handler on the root logger at ``level``."""

    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
