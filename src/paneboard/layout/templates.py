"""Declarative layout templates.

A layout template describes how the screen is split, independent of the
actual terminal size:

    LayoutTemplate(
        name="wide",
        min_width=120,
        root=Column([Span("source", weight=3), Span("variables", weight=2)]),
    )

``Row`` stacks its children vertically and splits the height between them,
``Column`` places them side by side and splits the width. Splits are
proportional to each child's ``weight``. ``Span`` binds a leaf to a pane name,
``Space`` is blank filler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Union

from paneboard.errors import LayoutError


def _check_weight(node: object, weight: int) -> None:
    if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
        raise LayoutError(f"{type(node).__name__} weight must be a positive integer, got {weight!r}")


@dataclass(frozen=True)
class Span:
    """Leaf bound to a symbolic pane name."""
    pane: str
    weight: int = 1

    def __post_init__(self) -> None:
        _check_weight(self, self.weight)


@dataclass(frozen=True)
class Space:
    """Blank leaf: occupies space, has no pane."""
    weight: int = 1

    def __post_init__(self) -> None:
        _check_weight(self, self.weight)


@dataclass(frozen=True, init=False)
class _Container:
    children: tuple[Node, ...]
    weight: int = 1

    def __init__(self, children: Sequence[Node], weight: int = 1) -> None:
        object.__setattr__(self, "children", tuple(children))
        object.__setattr__(self, "weight", weight)
        _check_weight(self, weight)
        if not self.children:
            raise LayoutError(f"{type(self).__name__} needs at least one child")
        for child in self.children:
            if not isinstance(child, (Row, Column, Span, Space)):
                raise LayoutError(f"Unsupported layout node: {child!r}")

    @property
    def total_weight(self) -> int:
        return sum(child.weight for child in self.children)


class Row(_Container):
    """Children stacked top to bottom; height is shared by weight."""


class Column(_Container):
    """Children placed left to right; width is shared by weight."""


Node = Union[Row, Column, Span, Space]
Leaf = Union[Span, Space]


def iter_leaves(node: Node) -> Iterator[Leaf]:
    """Yield leaves depth-first, in drawing order."""
    if isinstance(node, (Span, Space)):
        yield node
        return
    for child in node.children:
        yield from iter_leaves(child)


@dataclass(frozen=True)
class LayoutTemplate:
    """
    Root of a layout tree with optional size thresholds.

    ``min_width`` and ``min_height`` are exclusive: a template with
    ``min_width=80`` only applies to terminals wider than 80 columns.
    ``None`` means no constraint.
    """
    root: Node
    min_width: Optional[int] = None
    min_height: Optional[int] = None
    name: str = field(default="")

    def __post_init__(self) -> None:
        if not isinstance(self.root, (Row, Column, Span, Space)):
            raise LayoutError(f"Unsupported layout root: {self.root!r}")

    def matches(self, width: int, height: int) -> bool:
        """Check both thresholds against a viewport (strictly greater-than)."""
        if self.min_width is not None and not width > self.min_width:
            return False
        if self.min_height is not None and not height > self.min_height:
            return False
        return True

    def pane_names(self) -> list[str]:
        """Pane names referenced by this template, depth-first."""
        return [leaf.pane for leaf in iter_leaves(self.root) if isinstance(leaf, Span)]


def pick_layout(templates: Sequence[LayoutTemplate], width: int, height: int) -> LayoutTemplate:
    """
    Choose the template for a viewport.

    Templates are scanned in order and the first match wins, so callers list
    them from most demanding to most general. When nothing matches, the first
    template is returned anyway so even a tiny terminal gets a layout.
    """
    if not templates:
        raise LayoutError("No layout templates configured")
    for template in templates:
        if template.matches(width, height):
            return template
    return templates[0]
