"""Screen manager - owns the terminal and runs the dashboard draw cycle.

One ``update()`` repaints everything:

    hide cursor, clear
    -> query size -> pick layout template -> resolve regions
    -> build panes -> draw borders -> shrink panes to content -> paint
    -> park the cursor under the dashboard for the next prompt
    -> print pending debug log lines

A failure anywhere in that chain is turned into an error panel instead of
escaping to the debugger, and the terminal is always handed back in cooked
mode with echo and a visible cursor.
"""

from __future__ import annotations

import atexit
import logging
import sys
import traceback
from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence, TextIO

from paneboard.config import ScreenConfig
from paneboard.core.terminal import Terminal
from paneboard.errors import LayoutError
from paneboard.layout.presets import DEFAULT_LAYOUTS
from paneboard.layout.resolver import ResolvedRegion, resolve_layout
from paneboard.layout.templates import LayoutTemplate, pick_layout
from paneboard.log import DebugLogHandler, attach_debug_log, detach_debug_log
from paneboard.panes.base import Pane, adjust_content
from paneboard.panes.registry import PaneRegistry
from paneboard.render.box_drawer import BoxDrawer
from paneboard.screen.interceptor import OutputInterceptor, SideBuffer

logger = logging.getLogger(__name__)

ERROR_MARKER = "--- Error ---"
DEBUG_MARKER = "--- Debug ---"
END_MARKER = "-------------"
NEWLINE = "\r\n"


class DiagnosticLog(Protocol):
    """Source of debug lines shown below the dashboard."""

    def pending_lines(self) -> Sequence[str]:
        ...

    def clear(self) -> None:
        ...


@dataclass(frozen=True)
class DrawOutcome:
    """Result of one draw cycle."""
    ok: bool
    width: Optional[int] = None
    height: Optional[int] = None
    template: Optional[LayoutTemplate] = None
    regions: tuple[ResolvedRegion, ...] = ()
    panes: tuple[Pane, ...] = field(default=(), repr=False)
    error: Optional[Exception] = None


def format_trace(exc: BaseException, limit: int) -> list[str]:
    """Traceback lines of ``exc``, innermost frame first."""
    if limit <= 0:
        return []
    frames = reversed(traceback.extract_tb(exc.__traceback__))
    lines = [f'  File "{frame.filename}", line {frame.lineno}, in {frame.name}' for frame in frames]
    return lines[:limit]


class ScreenManager:
    """
    Coordinates layout, borders and panes on the terminal.

    Create one per process and call ``update()`` whenever the debugger stops.
    While started, the dashboard lives on the alternate screen and output
    written to ``sys.stdout`` by the program outside of a draw cycle is kept
    in a side buffer, then replayed on the normal screen by ``stop()``.
    """

    def __init__(
        self,
        layouts: Sequence[LayoutTemplate] = DEFAULT_LAYOUTS,
        registry: Optional[PaneRegistry] = None,
        output: Optional[TextIO] = None,
        terminal: Optional[Terminal] = None,
        debug_log: Optional[DiagnosticLog] = None,
        config: Optional[ScreenConfig] = None,
    ) -> None:
        self.layouts = tuple(layouts)
        if not self.layouts:
            raise LayoutError("ScreenManager needs at least one layout template")
        self.output = output if output is not None else sys.stdout
        self.terminal = terminal if terminal is not None else Terminal(self.output)
        self.registry = registry if registry is not None else PaneRegistry()
        self.config = config if config is not None else ScreenConfig()
        # A handler we create is only attached while started
        self._own_log: Optional[DebugLogHandler] = None
        if debug_log is None and self.config.debug:
            debug_log = self._own_log = DebugLogHandler()
        self.debug_log = debug_log

        self._started = False
        self._updating = False
        self._buffer = SideBuffer()
        self._interceptor: Optional[OutputInterceptor] = None
        self._real_stdout: Optional[TextIO] = None

    @property
    def started(self) -> bool:
        return self._started

    @property
    def updating(self) -> bool:
        return self._updating

    @property
    def captured_output(self) -> str:
        """Stray output collected since ``start()``."""
        return self._buffer.getvalue()

    def __enter__(self) -> ScreenManager:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    # Lifecycle

    def start(self) -> None:
        if self._started:
            return

        self.terminal.start_alternate_screen()
        self.terminal.hard_clear()
        if self._buffer.closed:
            self._buffer = SideBuffer()
        if self._own_log is not None:
            attach_debug_log(self._own_log)
        self._install_interceptor()
        atexit.register(self.stop)
        self._started = True
        logger.debug("Dashboard started")

    def stop(self) -> None:
        if not self._started:
            return

        self._started = False
        self.terminal.stop_alternate_screen()
        self.terminal.show_cursor()
        self._uninstall_interceptor()

        captured = self._buffer.drain()
        if captured:
            self.output.write("\n")
            self.output.write(captured)
            self.output.write("\n")
            self.output.flush()
        self._buffer.close()
        atexit.unregister(self.stop)
        logger.debug("Dashboard stopped")
        if self._own_log is not None:
            detach_debug_log(self._own_log)
            self._own_log.clear()

    def _should_capture(self) -> bool:
        return self._started and not self._updating

    def _install_interceptor(self) -> None:
        self._real_stdout = sys.stdout
        self._interceptor = OutputInterceptor(sys.stdout, self._buffer, self._should_capture)
        sys.stdout = self._interceptor

    def _uninstall_interceptor(self) -> None:
        # Someone may have replaced stdout after us; leave theirs alone
        if self._interceptor is not None and sys.stdout is self._interceptor:
            sys.stdout = self._real_stdout
        self._interceptor = None
        self._real_stdout = None

    # Draw cycle

    def update(self) -> DrawOutcome:
        """Repaint the whole dashboard."""
        if not self._started:
            self.start()
        self._updating = True
        try:
            outcome = self._draw_cycle()
            if not outcome.ok:
                self.terminal.clear()
                self._draw_error(outcome.height, outcome.error)
            return outcome
        finally:
            try:
                self._restore_terminal()
            finally:
                self._updating = False

    def _restore_terminal(self) -> None:
        """Hand the tty back cooked, echoing and with a cursor.

        Every step is attempted even when an earlier one fails; the first
        failure is raised once all of them have run.
        """
        steps = (
            self.terminal.set_cooked,
            lambda: self.terminal.set_echo(True),
            self.terminal.show_cursor,
        )
        first_error: Optional[Exception] = None
        for step in steps:
            try:
                step()
            except Exception as exc:
                logger.warning("Terminal restore step failed: %s", exc)
                if first_error is None:
                    first_error = exc
        if first_error is not None:
            raise first_error

    def _draw_cycle(self) -> DrawOutcome:
        width: Optional[int] = None
        height: Optional[int] = None
        template: Optional[LayoutTemplate] = None
        regions: list[ResolvedRegion] = []
        panes: list[Pane] = []
        try:
            self.terminal.hide_cursor()
            self.terminal.clear()
            size = self.terminal.size()
            width, height = size.cols, size.rows
            template = pick_layout(self.layouts, width, height)
            regions = resolve_layout(template, width, height)
            logger.debug("Layout %r resolved to %d regions for %dx%d", template.name, len(regions), width, height)
            missing = self.registry.missing(template.pane_names())
            if missing:
                logger.debug("Layout %r has unregistered panes: %s", template.name, ", ".join(missing))
            panes = self._draw_panes(regions, width, height)
            self._jump_to_prompt(regions)
            self._draw_debug(height)
        except Exception as exc:
            logger.exception("Draw cycle failed")
            return DrawOutcome(
                ok=False, width=width, height=height, template=template,
                regions=tuple(regions), panes=tuple(panes), error=exc,
            )
        return DrawOutcome(
            ok=True, width=width, height=height, template=template,
            regions=tuple(regions), panes=tuple(panes),
        )

    def _draw_panes(self, regions: Sequence[ResolvedRegion], width: int, height: int) -> list[Pane]:
        panes: list[Pane] = []
        framed: list[object] = []
        titles: list[Optional[str]] = []
        for region in regions:
            pane = self.registry.create(region)
            if pane is not None:
                panes.append(pane)
                framed.append(pane)
                titles.append(pane.title)
            elif region.pane is None and self.config.space_borders:
                framed.append(region)
                titles.append(None)

        BoxDrawer(
            self.output, framed, titles,
            border_style=self.config.border_style,
            title_style=self.config.title_style,
            area=(width, height),
        ).draw()

        for pane in panes:
            adjust_content(pane)
        for pane in panes:
            pane.paint(self.output)
        self.output.flush()
        return panes

    def _jump_to_prompt(self, regions: Sequence[ResolvedRegion]) -> None:
        prompt_y = max((region.bottom for region in regions), default=0)
        self.terminal.move_to(0, prompt_y)

    def _draw_debug(self, height: int) -> None:
        if self.debug_log is None:
            return
        lines = list(self.debug_log.pending_lines())
        if lines:
            out = [DEBUG_MARKER, *lines[:max(0, height - 2)], END_MARKER]
            self.output.write(NEWLINE.join(out) + NEWLINE)
            self.output.flush()
        self.debug_log.clear()

    def _draw_error(self, height: Optional[int], exc: Optional[Exception]) -> None:
        if height is None:
            height = self.config.fallback_height
        lines = [
            ERROR_MARKER,
            "Internal error while drawing the dashboard. Sorry for messing up your debugging session.",
            f"Please report it at {self.config.issue_url}",
            "",
        ]
        if exc is not None:
            lines.append(f"{type(exc).__name__}: {exc}")
            lines.extend(format_trace(exc, height - 5))
        lines.append(END_MARKER)
        self.output.write(NEWLINE.join(lines) + NEWLINE)
        self.output.flush()
