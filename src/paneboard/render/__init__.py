"""Rendering helpers for the dashboard chrome."""

from paneboard.render.box_drawer import BoxDrawer, GLYPHS

__all__ = ["BoxDrawer", "GLYPHS"]
