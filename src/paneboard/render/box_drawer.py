"""Draw merged single-line borders around a set of screen rectangles."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, TextIO

from paneboard.core.ansi_text import truncate
from paneboard.core.constants import BORDER_STYLE, BOX, RESET, TITLE_STYLE
from paneboard.core.terminal import cursor_to

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"

# Glyph for each combination of directions a border continues in
GLYPHS: dict[frozenset[str], str] = {
    frozenset({LEFT}): BOX["horizontal"],
    frozenset({RIGHT}): BOX["horizontal"],
    frozenset({LEFT, RIGHT}): BOX["horizontal"],
    frozenset({UP}): BOX["vertical"],
    frozenset({DOWN}): BOX["vertical"],
    frozenset({UP, DOWN}): BOX["vertical"],
    frozenset({RIGHT, DOWN}): BOX["top_left"],
    frozenset({LEFT, DOWN}): BOX["top_right"],
    frozenset({RIGHT, UP}): BOX["bottom_left"],
    frozenset({LEFT, UP}): BOX["bottom_right"],
    frozenset({UP, DOWN, RIGHT}): BOX["tee_right"],
    frozenset({UP, DOWN, LEFT}): BOX["tee_left"],
    frozenset({LEFT, RIGHT, DOWN}): BOX["tee_down"],
    frozenset({LEFT, RIGHT, UP}): BOX["tee_up"],
    frozenset({UP, DOWN, LEFT, RIGHT}): BOX["cross"],
}


class Bounds(Protocol):
    """Anything with a position and a size (regions, panes)."""
    x: int
    y: int
    width: int
    height: int


class BoxDrawer:
    """
    Paint borders for every rectangle, merging shared edges.

    A rectangle is framed by the grid lines at ``x`` and ``x + width`` and
    at ``y`` and ``y + height``, so neighbours share a single border line.
    Lines past the drawing area (``area`` as width and height, or else the
    bounding box of all rectangles) are pulled back onto its last column or
    row.

    Each border cell records which directions its line continues in; the
    union over all rectangles decides the glyph, which turns meeting edges
    into corners, T-junctions and crosses.
    """

    def __init__(
        self,
        output: TextIO,
        rects: Sequence[Bounds],
        titles: Optional[Sequence[Optional[str]]] = None,
        border_style: str = BORDER_STYLE,
        title_style: str = TITLE_STYLE,
        area: Optional[tuple[int, int]] = None,
    ) -> None:
        self.output = output
        self.rects = [r for r in rects if r.width > 0 and r.height > 0]
        self.titles = list(titles) if titles is not None else []
        self.border_style = border_style
        self.title_style = title_style
        if area is not None:
            self._area_right, self._area_bottom = area[0] - 1, area[1] - 1
        elif self.rects:
            self._area_right = max(r.x + r.width for r in self.rects) - 1
            self._area_bottom = max(r.y + r.height for r in self.rects) - 1
        self._titled = [
            (r, title) for r, title in zip(rects, self.titles)
            if title and r.width > 0 and r.height > 0
        ]

    def _frame(self, rect: Bounds) -> tuple[int, int, int, int]:
        """Border lines (left, top, right, bottom) of a rectangle."""
        right = min(rect.x + rect.width, self._area_right)
        bottom = min(rect.y + rect.height, self._area_bottom)
        return rect.x, rect.y, right, bottom

    def directions(self) -> dict[tuple[int, int], set[str]]:
        """Map every border cell to the directions its line continues in."""
        cells: dict[tuple[int, int], set[str]] = {}

        def mark(x: int, y: int, direction: str) -> None:
            cells.setdefault((x, y), set()).add(direction)

        for rect in self.rects:
            left, top, right, bottom = self._frame(rect)
            for row in {top, bottom}:
                for x in range(left, right + 1):
                    cells.setdefault((x, row), set())
                    if x > left:
                        mark(x, row, LEFT)
                    if x < right:
                        mark(x, row, RIGHT)
            for col in {left, right}:
                for y in range(top, bottom + 1):
                    cells.setdefault((col, y), set())
                    if y > top:
                        mark(col, y, UP)
                    if y < bottom:
                        mark(col, y, DOWN)
        return cells

    def glyphs(self) -> dict[tuple[int, int], str]:
        """Final glyph for every border cell, keyed by (x, y)."""
        return {
            cell: GLYPHS[frozenset(dirs)]
            for cell, dirs in self.directions().items()
            if dirs
        }

    def draw(self) -> None:
        """Write borders and titles to the output."""
        if not self.rects:
            return

        # Batch horizontally contiguous cells into one positioned write
        runs: list[tuple[int, int, str]] = []
        for (x, y), glyph in sorted(self.glyphs().items(), key=lambda item: (item[0][1], item[0][0])):
            if runs and runs[-1][1] == y and runs[-1][0] + len(runs[-1][2]) == x:
                start_x, _, text = runs[-1]
                runs[-1] = (start_x, y, text + glyph)
            else:
                runs.append((x, y, glyph))

        for x, y, text in runs:
            self.output.write(f"{cursor_to(x, y)}{self.border_style}{text}{RESET}")

        for rect, title in self._titled:
            left, top, right, _ = self._frame(rect)
            # Leave a corner and one line cell on both sides
            available = right - left - 3
            if available <= 0:
                continue
            label = truncate(f" {title} ", available, reset=False)
            self.output.write(f"{cursor_to(left + 2, top)}{self.title_style}{label}{RESET}")

        self.output.flush()
