"""Logging setup for the word-search generator and its CLI.

Generation reports one INFO summary per grid and one WARNING per word that
ran out of placement attempts; individual placements and the fill pass log at
DEBUG. Everything goes to stderr so the CLI can print JSON on stdout.
"""

from __future__ import annotations

import logging
from typing import IO, Optional


LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO, stream: Optional[IO[str]] = None) -> None:
    """Route all records through one handler with the wordsearch format.

    Replaces any existing root handlers so repeated CLI runs in one process
    do not print each record twice.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def level_from_name(name: str, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its logging constant."""

    value = getattr(logging, name.upper(), None)
    return value if isinstance(value, int) else default


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for a wordsearch module; installs the stderr handler on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")
