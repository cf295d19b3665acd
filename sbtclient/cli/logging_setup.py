"""Logging configuration for the sbtc command."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "sbtclient"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int | str = logging.WARNING, stream: TextIO | None = None) -> None:
    """Send sbtclient log records to stderr.

    Configures the ``sbtclient`` namespace logger only; the root logger is
    left alone. Calling again replaces the previous handler.

    Args:
        level: Logging level, as a number or a name like "DEBUG".
        stream: Destination stream (default sys.stderr).
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    sbt_logger = logging.getLogger(LOGGER_NAME)
    sbt_logger.setLevel(level)
    sbt_logger.handlers.clear()
    sbt_logger.addHandler(handler)
    sbt_logger.propagate = False
