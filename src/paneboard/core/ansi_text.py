"""ANSI text utilities - measuring and fitting strings with escape codes."""

from __future__ import annotations

import re

from paneboard.core.constants import RESET

# SGR and cursor sequences, including the ~ terminator used by some keys
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]')


def strip_ansi(s: str) -> str:
    """Remove escape sequences, leaving only the visible text."""
    return _ANSI_ESCAPE.sub('', s)


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(strip_ansi(s))


def truncate(s: str, max_width: int, reset: bool = True) -> str:
    """
    Truncate an ANSI-escaped string to max visible width.

    Escape sequences are kept whole and do not count towards the width.
    When anything was cut and ``reset`` is set, a reset sequence is
    appended so colors do not bleed into the border that follows.
    """
    if max_width <= 0:
        return ""

    parts: list[str] = []
    width = 0
    pos = 0
    while pos < len(s) and width < max_width:
        match = _ANSI_ESCAPE.match(s, pos)
        if match:
            parts.append(match.group())
            pos = match.end()
            continue
        parts.append(s[pos])
        width += 1
        pos += 1

    # Trailing escape codes right at the cut still apply (usually a reset)
    while pos < len(s):
        match = _ANSI_ESCAPE.match(s, pos)
        if not match:
            break
        parts.append(match.group())
        pos = match.end()

    result = ''.join(parts)
    if reset and pos < len(s):
        result += RESET
    return result


def fit(s: str, width: int) -> str:
    """Truncate or pad so the string occupies exactly ``width`` visible columns."""
    if width <= 0:
        return ""
    vlen = visible_len(s)
    if vlen > width:
        return truncate(s, width)
    return s + ' ' * (width - vlen)
