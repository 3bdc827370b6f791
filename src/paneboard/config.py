"""Screen manager configuration.

Defaults live in ``paneboard.core.constants``; ``ScreenConfig.from_env``
lets a user flip the boolean policies without code changes:

    PANEBOARD_SPACE_BORDERS=1   draw borders around blank Space regions
    PANEBOARD_DEBUG=1           show collected log lines under the dashboard
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from paneboard.core import constants as c

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class ScreenConfig:
    """Settings for one screen manager."""
    issue_url: str = c.ISSUE_URL
    space_borders: bool = False     # Space regions join border drawing
    border_style: str = c.BORDER_STYLE
    title_style: str = c.TITLE_STYLE
    debug: bool = False             # render pending debug log lines
    fallback_height: int = c.DEFAULT_ROWS

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> ScreenConfig:
        env = os.environ if env is None else env
        return cls(
            space_borders=_env_flag(env, "PANEBOARD_SPACE_BORDERS", False),
            debug=_env_flag(env, "PANEBOARD_DEBUG", False),
        )
