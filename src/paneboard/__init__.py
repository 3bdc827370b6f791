"""
paneboard: layout-and-draw engine for terminal debugger dashboards

Split the terminal into bordered panes from a declarative, size-adaptive
layout and repaint them on every debugger stop.

Quick Start:
    >>> from paneboard import PaneRegistry, ScreenManager, TextPane
    >>> registry = PaneRegistry({"source": TextPane.factory(["x = 1"])})
    >>> manager = ScreenManager(registry=registry)
    >>> manager.update()     # draw the dashboard
    >>> manager.stop()       # back to the normal screen

Features:
    - Row / Column / Span / Space layout templates with weights
    - Template selection by terminal size with a guaranteed fallback
    - Exact tiling of the viewport, merged borders with proper junctions
    - Pluggable panes looked up by name
    - Stray stdout captured while the dashboard is shown, replayed on stop
    - Draw failures rendered as an error panel; the tty is always restored
"""

import logging

__version__ = "0.1.0"

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

from paneboard.config import ScreenConfig
from paneboard.errors import LayoutError, PaneboardError, TerminalSizeError

# Layout
from paneboard.layout.templates import Column, LayoutTemplate, Row, Space, Span, pick_layout
from paneboard.layout.resolver import ResolvedRegion, resolve, resolve_layout
from paneboard.layout.presets import DEFAULT_LAYOUTS

# Drawing
from paneboard.render.box_drawer import BoxDrawer
from paneboard.panes import Pane, PaneRegistry, TextPane, adjust_content
from paneboard.screen import DrawOutcome, ScreenManager
from paneboard.log import DebugLogHandler, attach_debug_log

__all__ = [
    # Version
    "__version__",
    # Configuration and errors
    "ScreenConfig",
    "PaneboardError",
    "LayoutError",
    "TerminalSizeError",
    # Layout
    "Column",
    "LayoutTemplate",
    "Row",
    "Space",
    "Span",
    "pick_layout",
    "ResolvedRegion",
    "resolve",
    "resolve_layout",
    "DEFAULT_LAYOUTS",
    # Drawing
    "BoxDrawer",
    "Pane",
    "PaneRegistry",
    "TextPane",
    "adjust_content",
    "DrawOutcome",
    "ScreenManager",
    # Diagnostics
    "DebugLogHandler",
    "attach_debug_log",
]
