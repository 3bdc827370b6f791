"""Typer CLI application for inspecting layouts and trying the dashboard."""

from __future__ import annotations

import sys
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from paneboard.config import ScreenConfig
from paneboard.core.constants import DEFAULT_COLS, DEFAULT_ROWS
from paneboard.core.terminal import Terminal
from paneboard.errors import TerminalSizeError
from paneboard.layout.presets import (
    BACKTRACE,
    DEFAULT_LAYOUTS,
    MENU,
    SOURCE,
    THREADS,
    VARIABLES,
)
from paneboard.layout.resolver import resolve_layout
from paneboard.layout.templates import pick_layout
from paneboard.panes.registry import PaneRegistry
from paneboard.panes.text import TextPane

SAMPLE_SOURCE = [
    "\x1b[90m 10\x1b[0m def total(items):",
    "\x1b[90m 11\x1b[0m     result = 0",
    "\x1b[1;32m⮕ 12\x1b[0m     for item in items:",
    "\x1b[90m 13\x1b[0m         result += item.price",
    "\x1b[90m 14\x1b[0m     return result",
]
SAMPLE_BACKTRACE = [
    "\x1b[1m⮕ 0\x1b[0m total at cart.py:12",
    "  1 checkout at views.py:48",
    "  2 dispatch at app.py:201",
]
SAMPLE_VARIABLES = [
    "items  = [<Item apple>, <Item pear>]",
    "result = 0",
]
SAMPLE_THREADS = [
    "\x1b[1m⮕ MainThread\x1b[0m (running)",
    "  worker-1 (sleeping)",
]
SAMPLE_MENU = ["step (F7)  next (F8)  continue (F9)  exit"]


def sample_registry() -> PaneRegistry:
    """Registry with static content for every default pane."""
    return PaneRegistry({
        SOURCE: TextPane.factory(SAMPLE_SOURCE, title="Source: cart.py"),
        BACKTRACE: TextPane.factory(SAMPLE_BACKTRACE),
        VARIABLES: TextPane.factory(SAMPLE_VARIABLES),
        THREADS: TextPane.factory(SAMPLE_THREADS),
        MENU: TextPane.factory(SAMPLE_MENU),
    })


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="paneboard",
        help="Lay out and draw terminal debugger dashboards.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.command()
    def layouts(
        width: Annotated[Optional[int], typer.Option("--width", "-w", help="Viewport width (default: terminal)")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-H", help="Viewport height (default: terminal)")] = None,
    ) -> None:
        """Show which layout applies to a viewport and the regions it resolves to."""
        if width is None or height is None:
            try:
                size = Terminal().size()
                cols, rows = size.cols, size.rows
            except TerminalSizeError:
                cols, rows = DEFAULT_COLS, DEFAULT_ROWS
            width = cols if width is None else width
            height = rows if height is None else height

        template = pick_layout(DEFAULT_LAYOUTS, width, height)
        console.print(f"[bold cyan]Layout {template.name!r}[/] for {width}x{height}")

        table = Table("pane", "x", "y", "width", "height")
        for region in resolve_layout(template, width, height):
            table.add_row(region.pane or "[dim](space)[/]", str(region.x), str(region.y),
                          str(region.width), str(region.height))
        console.print(table)

    @app.command()
    def demo(
        wait: Annotated[bool, typer.Option("--wait/--no-wait", help="Wait for Enter before restoring the screen")] = True,
    ) -> None:
        """Draw the default dashboard once with sample content."""
        from paneboard.screen.manager import ScreenManager

        config = ScreenConfig.from_env()
        with ScreenManager(registry=sample_registry(), output=sys.stdout, config=config) as manager:
            outcome = manager.update()
            if wait:
                sys.stdin.readline()

        if not outcome.ok:
            console.print(f"[red]Draw failed: {outcome.error}[/]")
            raise typer.Exit(1)
        console.print(f"[green]Drew {len(outcome.panes)} panes with layout {outcome.template.name!r}[/]")

    return app
