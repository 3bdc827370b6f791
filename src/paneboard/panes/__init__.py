"""Pane contract, built-in panes and the pane registry."""

from paneboard.panes.base import Pane, PaneFactory, adjust_content
from paneboard.panes.text import TextPane
from paneboard.panes.registry import PaneRegistry

__all__ = [
    "Pane",
    "PaneFactory",
    "adjust_content",
    "TextPane",
    "PaneRegistry",
]
