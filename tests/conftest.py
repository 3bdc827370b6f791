"""Shared fixtures: a recording terminal and an in-memory screen."""

from __future__ import annotations

import io
import re
from typing import Optional

import pytest

from paneboard.core.terminal import Terminal, TerminalSize
from paneboard.errors import TerminalSizeError

_CURSOR_TO = re.compile(r'\x1b\[(\d+);(\d+)H')
_OTHER_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z]')


class FakeTerminal(Terminal):
    """Terminal writing to a StringIO with a fixed size and tracked tty modes."""

    def __init__(self, output: io.StringIO, cols: int = 100, rows: int = 30) -> None:
        super().__init__(output, io.StringIO())
        self.cols = cols
        self.rows = rows
        self.size_error: Optional[Exception] = None
        self.calls: list[str] = []
        self.cooked = False
        self.echo = False
        self.cursor_visible = True

    def size(self) -> TerminalSize:
        self.calls.append("size")
        if self.size_error is not None:
            raise self.size_error
        return TerminalSize(self.rows, self.cols)

    def start_alternate_screen(self) -> None:
        self.calls.append("start_alternate_screen")
        super().start_alternate_screen()

    def stop_alternate_screen(self) -> None:
        self.calls.append("stop_alternate_screen")
        super().stop_alternate_screen()

    def clear(self) -> None:
        self.calls.append("clear")
        super().clear()

    def hard_clear(self) -> None:
        self.calls.append("hard_clear")
        super().hard_clear()

    def hide_cursor(self) -> None:
        self.calls.append("hide_cursor")
        self.cursor_visible = False
        super().hide_cursor()

    def show_cursor(self) -> None:
        self.calls.append("show_cursor")
        self.cursor_visible = True
        super().show_cursor()

    def move_to(self, x: int, y: int) -> None:
        self.calls.append(f"move_to {x} {y}")
        super().move_to(x, y)

    def set_cooked(self) -> None:
        self.calls.append("set_cooked")
        self.cooked = True

    def set_echo(self, enabled: bool) -> None:
        self.calls.append(f"set_echo {enabled}")
        self.echo = enabled


def render_screen(data: str, cols: int, rows: int) -> list[str]:
    """
    Replay positioned writes onto a blank grid.

    Understands cursor positioning, full-screen clears and plain text;
    every other escape sequence is dropped. Newlines move to the start of the next row.
    """
    grid = [[' '] * cols for _ in range(rows)]
    x = y = 0
    pos = 0
    while pos < len(data):
        move = _CURSOR_TO.match(data, pos)
        if move:
            y, x = int(move.group(1)) - 1, int(move.group(2)) - 1
            pos = move.end()
            continue
        other = _OTHER_ESCAPE.match(data, pos)
        if other:
            if other.group() == "\x1b[2J":
                grid = [[' '] * cols for _ in range(rows)]
            elif other.group() == "\x1b[H":
                x = y = 0
            pos = other.end()
            continue
        char = data[pos]
        pos += 1
        if char == '\n':
            x, y = 0, y + 1
        elif char == '\r':
            x = 0
        else:
            if 0 <= y < rows and 0 <= x < cols:
                grid[y][x] = char
            x += 1
    return [''.join(row) for row in grid]


@pytest.fixture
def screen() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def terminal(screen: io.StringIO) -> FakeTerminal:
    return FakeTerminal(screen)


@pytest.fixture
def render():
    return render_screen
