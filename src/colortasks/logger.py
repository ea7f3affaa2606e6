"""The colortasks logger and its verbosity levels.

Verbosity 1 reports task mutations, 2 adds rejected input and ignored
operations, 3 adds color conversions. Verbosity 0 only lets errors through.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

LOGGER_NAME = "colortasks"
CHANGES_LEVEL = 25  # task added, toggled, removed, cleared
CHECKS_LEVEL = 15  # rejected input and no-op operations

logging.addLevelName(CHANGES_LEVEL, "CHANGES")
logging.addLevelName(CHECKS_LEVEL, "CHECKS")

# Index is the -v count given on the command line
VERBOSITY_LEVELS = (logging.ERROR, CHANGES_LEVEL, CHECKS_LEVEL, logging.DEBUG)


class TaskLogger(logging.Logger):
    """Logger with one method per task-list verbosity level."""

    def changes(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHANGES_LEVEL):
            self._log(CHANGES_LEVEL, msg, args, **kwargs)

    def checks(self, msg: str, *args: Any, **kwargs: Any) -> None:
        if self.isEnabledFor(CHECKS_LEVEL):
            self._log(CHECKS_LEVEL, msg, args, **kwargs)


def get_logger() -> TaskLogger:
    """Return the shared colortasks logger."""
    logging.setLoggerClass(TaskLogger)
    logger = logging.getLogger(LOGGER_NAME)
    assert isinstance(logger, TaskLogger)
    return logger


def setup_logger(verbosity: int, stream: TextIO | None = None) -> None:
    """Route colortasks messages up to ``verbosity`` to ``stream`` (stderr by default).

    Verbosity past the last level is treated as the last level.
    """
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(VERBOSITY_LEVELS[max(0, min(verbosity, len(VERBOSITY_LEVELS) - 1))])

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False


def reset_logger() -> None:
    """Drop handlers and go back to errors only."""
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.ERROR)


def debug_enabled() -> bool:
    """True when debug messages would be emitted; lets callers skip formatting them."""
    return get_logger().isEnabledFor(logging.DEBUG)
