"""Diagnostic log shown under the dashboard.

Anything logged under the ``paneboard`` logger while the dashboard is up
would otherwise be drawn over by the next repaint. ``DebugLogHandler`` keeps
the formatted lines instead; the screen manager prints them below the panes
and clears them after each cycle.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Optional

from paneboard.core.constants import DEBUG_LOG_MAX_LINES

LOGGER_NAME = "paneboard"


class DebugLogHandler(logging.Handler):
    """Collects formatted log records until they are displayed."""

    def __init__(self, level: int = logging.DEBUG, max_lines: int = DEBUG_LOG_MAX_LINES) -> None:
        super().__init__(level)
        self._lines: deque[str] = deque(maxlen=max_lines)
        self.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except Exception:
            self.handleError(record)
            return
        with self.lock:
            self._lines.extend(message.splitlines() or [""])

    def pending_lines(self) -> list[str]:
        with self.lock:
            return list(self._lines)

    def clear(self) -> None:
        with self.lock:
            self._lines.clear()


def attach_debug_log(
    handler: Optional[DebugLogHandler] = None,
    level: int = logging.DEBUG,
) -> DebugLogHandler:
    """Install a collecting handler on the package logger."""
    handler = handler or DebugLogHandler(level)
    logger = logging.getLogger(LOGGER_NAME)
    if handler not in logger.handlers:
        logger.addHandler(handler)
    if logger.level == logging.NOTSET or logger.level > level:
        logger.setLevel(level)
    return handler


def detach_debug_log(handler: DebugLogHandler) -> None:
    logging.getLogger(LOGGER_NAME).removeHandler(handler)
