"""Capture stray program output while the dashboard covers the screen."""

from __future__ import annotations

import io
import threading
from typing import Any, Callable, Iterable, TextIO


class SideBuffer:
    """Thread-safe text accumulator: many writers, one reader."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._buffer = io.StringIO()

    def append(self, text: str) -> None:
        with self._lock:
            if not self._buffer.closed:
                self._buffer.write(text)

    def getvalue(self) -> str:
        with self._lock:
            return "" if self._buffer.closed else self._buffer.getvalue()

    def drain(self) -> str:
        """Return everything buffered so far and start empty."""
        with self._lock:
            if self._buffer.closed:
                return ""
            text = self._buffer.getvalue()
            self._buffer = io.StringIO()
            return text

    def close(self) -> None:
        with self._lock:
            self._buffer.close()

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._buffer.closed

    def __bool__(self) -> bool:
        return bool(self.getvalue())


class OutputInterceptor:
    """
    Writer wrapping a real output stream.

    Every write goes through to ``stream`` untouched. It is also copied into
    ``buffer`` when ``should_capture()`` is true at the time of the write.
    Anything else (``fileno``, ``isatty``, ``encoding`` ...) is delegated to
    the wrapped stream, so it can stand in for ``sys.stdout``.
    """

    def __init__(self, stream: TextIO, buffer: SideBuffer, should_capture: Callable[[], bool]) -> None:
        self.stream = stream
        self.buffer = buffer
        self.should_capture = should_capture

    def write(self, text: str) -> int:
        if text and self.should_capture():
            self.buffer.append(text)
        return self.stream.write(text)

    def writelines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)

    def flush(self) -> None:
        self.stream.flush()

    def __getattr__(self, name: str) -> Any:
        return getattr(self.stream, name)
