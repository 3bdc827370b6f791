"""Layout system: declarative templates and their resolution into regions."""

from paneboard.layout.templates import (
    Column,
    LayoutTemplate,
    Row,
    Space,
    Span,
    iter_leaves,
    pick_layout,
)
from paneboard.layout.resolver import ResolvedRegion, resolve, resolve_layout, split
from paneboard.layout.presets import DEFAULT_LAYOUTS, NARROW_LAYOUT, WIDE_LAYOUT

__all__ = [
    "Column",
    "LayoutTemplate",
    "Row",
    "Space",
    "Span",
    "iter_leaves",
    "pick_layout",
    "ResolvedRegion",
    "resolve",
    "resolve_layout",
    "split",
    "DEFAULT_LAYOUTS",
    "NARROW_LAYOUT",
    "WIDE_LAYOUT",
]
