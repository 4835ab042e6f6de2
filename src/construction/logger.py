"""Verbosity-levelled logging for the scheduling passes.

``-v`` on the command line picks how much of the propagation is shown:

====  ===========  =================================================
``0``  ERROR        failures only
``1``  RESOLVED     start times as each pass fixes them
``2``  WAITING      tasks popped before their prerequisites resolved
``3``  DEBUG        every worklist push and the topological order
====  ===========  =================================================
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

LOGGER_NAME = "construction"

RESOLVED_LEVEL = 25
WAITING_LEVEL = 15

logging.addLevelName(RESOLVED_LEVEL, "RESOLVED")
logging.addLevelName(WAITING_LEVEL, "WAITING")

VERBOSITY_SILENT = 0
VERBOSITY_CHANGES = 1
VERBOSITY_CHECKS = 2
VERBOSITY_DEBUG = 3

# Indexed by verbosity
_LEVELS = (logging.ERROR, RESOLVED_LEVEL, WAITING_LEVEL, logging.DEBUG)


class ConstructionLogger(logging.Logger):
    """Adds ``changes()`` and ``checks()`` to the standard logger."""

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """A start time was resolved or the project end fixed."""
        if self.isEnabledFor(RESOLVED_LEVEL):
            self._log(RESOLVED_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """A task was considered but left for later."""
        if self.isEnabledFor(WAITING_LEVEL):
            self._log(WAITING_LEVEL, msg, args, **kwargs)


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level; out-of-range values are clamped."""
    return _LEVELS[min(max(verbosity, VERBOSITY_SILENT), VERBOSITY_DEBUG)]


def get_logger() -> ConstructionLogger:
    """The shared ``construction`` logger."""
    logging.setLoggerClass(ConstructionLogger)
    logger = logging.getLogger(LOGGER_NAME)
    assert isinstance(logger, ConstructionLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Send bare messages at the given verbosity to ``stream`` (stderr by default).

    Replaces any handler installed by an earlier call.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(level_for_verbosity(verbosity))

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and go back to errors only."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)
