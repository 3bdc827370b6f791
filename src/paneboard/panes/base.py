"""Base pane contract and common functionality."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol, TextIO

from paneboard.core.ansi_text import fit
from paneboard.core.terminal import cursor_to
from paneboard.layout.templates import Span


class PaneFactory(Protocol):
    """Callable building a pane for a region of the screen."""

    def __call__(self, template: Span, width: int, height: int, x: int, y: int) -> Pane:
        ...


class Pane(ABC):
    """
    A drawable unit bound to one region of the dashboard.

    Geometry is mutable: the screen manager shrinks it to the content area
    once borders are drawn. Non-positive dimensions mean there is nothing to
    draw, which ``paint`` tolerates.
    """

    def __init__(self, template: Span, width: int, height: int, x: int, y: int) -> None:
        self.template = template
        self.width = width
        self.height = height
        self.x = x
        self.y = y

    @property
    def name(self) -> str:
        return self.template.pane

    @property
    def title(self) -> str:
        """Label written over the top border."""
        return self.name.capitalize()

    @abstractmethod
    def render(self) -> list[str]:
        """Content lines, top to bottom. May contain SGR codes."""
        pass

    def paint(self, output: TextIO) -> None:
        """Write content lines inside the pane rectangle."""
        if self.width <= 0 or self.height <= 0:
            return
        # Embedded newlines would leave the rectangle; give each its own row
        lines = [part for line in self.render() for part in line.splitlines() or [""]]
        for offset, line in enumerate(lines[:self.height]):
            output.write(cursor_to(self.x, self.y + offset) + fit(line, self.width))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.name!r}, width={self.width}, "
            f"height={self.height}, x={self.x}, y={self.y})"
        )


def adjust_content(pane: Pane) -> Pane:
    """Shrink a pane by one cell on every side, leaving room for its border."""
    pane.width -= 2
    pane.height -= 2
    pane.x += 1
    pane.y += 1
    return pane
