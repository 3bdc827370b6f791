"""Generic pane showing lines of text."""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Union

from paneboard.layout.templates import Span
from paneboard.panes.base import Pane, PaneFactory

LineSource = Union[Sequence[str], Callable[[], Sequence[str]]]


class TextPane(Pane):
    """Paints lines from a static list or from a callable queried on every paint."""

    def __init__(
        self,
        template: Span,
        width: int,
        height: int,
        x: int,
        y: int,
        lines: LineSource = (),
        title: Optional[str] = None,
    ) -> None:
        super().__init__(template, width, height, x, y)
        self._lines = lines
        self._title = title

    @property
    def title(self) -> str:
        if self._title is not None:
            return self._title
        return super().title

    def render(self) -> list[str]:
        source = self._lines() if callable(self._lines) else self._lines
        return list(source)

    @classmethod
    def factory(cls, lines: LineSource = (), title: Optional[str] = None) -> PaneFactory:
        """Bind content so the registry can build the pane from geometry alone."""

        def build(template: Span, width: int, height: int, x: int, y: int) -> TextPane:
            return cls(template, width, height, x, y, lines=lines, title=title)

        return build
