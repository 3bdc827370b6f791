"""Low-level terminal operations used by the screen manager."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from paneboard.core import constants as c
from paneboard.errors import TerminalSizeError


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


def cursor_to(x: int, y: int) -> str:
    """Escape sequence moving the cursor to column x, row y (0-indexed)."""
    return f"{c.CSI}{y + 1};{x + 1}H"


class Terminal:
    """
    Thin wrapper around the escape sequences and tty modes a dashboard needs.

    Every sequence is written to ``output``; tty modes are applied to
    ``input`` when it is an interactive terminal and ignored otherwise.
    """

    def __init__(self, output: Optional[TextIO] = None, input: Optional[TextIO] = None) -> None:
        self.output = output if output is not None else sys.stdout
        self.input = input if input is not None else sys.stdin

    def _emit(self, sequence: str) -> None:
        self.output.write(sequence)
        self.output.flush()

    def size(self) -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size(self.output.fileno())
        except (OSError, ValueError) as exc:
            raise TerminalSizeError(f"Terminal size unavailable: {exc}") from exc
        return TerminalSize(size.lines, size.columns)

    def start_alternate_screen(self) -> None:
        self._emit(c.ALT_SCREEN_ON)

    def stop_alternate_screen(self) -> None:
        self._emit(c.ALT_SCREEN_OFF)

    def clear(self) -> None:
        """Clear screen and move cursor to home."""
        self._emit(c.CLEAR_SCREEN)

    def hard_clear(self) -> None:
        """Clear screen and scrollback."""
        self._emit(c.HARD_CLEAR_SCREEN)

    def hide_cursor(self) -> None:
        self._emit(c.CURSOR_HIDE)

    def show_cursor(self) -> None:
        self._emit(c.CURSOR_SHOW)

    def move_to(self, x: int, y: int) -> None:
        """Move cursor to column x, row y (0-indexed)."""
        self._emit(cursor_to(x, y))

    def _input_fd(self) -> Optional[int]:
        try:
            if not self.input.isatty():
                return None
            return self.input.fileno()
        except (OSError, ValueError):
            return None

    def set_cooked(self) -> None:
        """Put the input terminal back into canonical (line-buffered) mode."""
        fd = self._input_fd()
        if fd is None:
            return
        try:
            import termios
        except ImportError:
            # Windows or no termios - nothing to restore
            return
        attrs = termios.tcgetattr(fd)
        attrs[0] |= termios.ICRNL | termios.IXON
        attrs[1] |= termios.OPOST
        attrs[3] |= termios.ICANON | termios.ISIG | termios.IEXTEN
        termios.tcsetattr(fd, termios.TCSADRAIN, attrs)

    def set_echo(self, enabled: bool) -> None:
        """Enable or disable echo of typed characters."""
        fd = self._input_fd()
        if fd is None:
            return
        try:
            import termios
        except ImportError:
            return
        attrs = termios.tcgetattr(fd)
        if enabled:
            attrs[3] |= termios.ECHO
        else:
            attrs[3] &= ~termios.ECHO
        termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
