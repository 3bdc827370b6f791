"""Core terminal infrastructure - escape sequences, terminal control, text fitting."""

from paneboard.core.terminal import Terminal, TerminalSize, cursor_to
from paneboard.core.ansi_text import fit, strip_ansi, truncate, visible_len

__all__ = [
    "Terminal",
    "TerminalSize",
    "cursor_to",
    "fit",
    "strip_ansi",
    "truncate",
    "visible_len",
]
