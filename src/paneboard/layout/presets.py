"""Built-in dashboard layouts.

Ordered from most demanding to most general; ``pick_layout`` takes the first
that fits the terminal.

WIDE (> 120 cols, > 24 rows):

    ┌──────────────┬─────────┐
    │ source       │variables│
    │              ├─────────┤
    │              │backtrace│
    │              ├─────────┤
    │              │ threads │
    ├──────────────┴─────────┤
    │ menu                   │
    └────────────────────────┘

NARROW (anything else): the same panes stacked, without threads.
"""

from paneboard.layout.templates import Column, LayoutTemplate, Row, Span

SOURCE = "source"
BACKTRACE = "backtrace"
THREADS = "threads"
VARIABLES = "variables"
MENU = "menu"

PANE_NAMES = (SOURCE, BACKTRACE, THREADS, VARIABLES, MENU)

WIDE_LAYOUT = LayoutTemplate(
    name="wide",
    min_width=120,
    min_height=24,
    root=Row([
        Column([
            Span(SOURCE, weight=5),
            Row([
                Span(VARIABLES, weight=3),
                Span(BACKTRACE, weight=2),
                Span(THREADS, weight=1),
            ], weight=4),
        ], weight=9),
        Span(MENU, weight=1),
    ]),
)

NARROW_LAYOUT = LayoutTemplate(
    name="narrow",
    root=Row([
        Span(SOURCE, weight=3),
        Span(VARIABLES, weight=2),
        Span(BACKTRACE, weight=2),
        Span(MENU, weight=1),
    ]),
)

DEFAULT_LAYOUTS: tuple[LayoutTemplate, ...] = (WIDE_LAYOUT, NARROW_LAYOUT)
