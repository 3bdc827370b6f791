"""Map symbolic pane names to the factories that build them."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from paneboard.layout.resolver import ResolvedRegion
from paneboard.panes.base import Pane, PaneFactory

logger = logging.getLogger(__name__)


class PaneRegistry:
    """
    Name -> factory lookup for panes.

    Unknown names are not an error: a region whose pane is not registered
    (blank space, or a typo in a layout) is simply left empty.
    """

    def __init__(self, factories: Optional[dict[str, PaneFactory]] = None) -> None:
        self._factories: dict[str, PaneFactory] = {}
        for name, factory in (factories or {}).items():
            self.register(name, factory)

    def register(self, name: str, factory: PaneFactory) -> None:
        if not callable(factory):
            raise TypeError(f"Pane factory for {name!r} is not callable")
        self._factories[name] = factory

    def unregister(self, name: str) -> None:
        self._factories.pop(name, None)

    def lookup(self, name: Optional[str]) -> Optional[PaneFactory]:
        if name is None:
            return None
        return self._factories.get(name)

    def create(self, region: ResolvedRegion) -> Optional[Pane]:
        """Build the pane for a resolved region, or None if there is none."""
        factory = self.lookup(region.pane)
        if factory is None:
            if region.pane is not None:
                logger.debug("No pane registered for %r, leaving region empty", region.pane)
            return None
        return factory(region.template, region.width, region.height, region.x, region.y)

    def names(self) -> list[str]:
        return sorted(self._factories)

    def missing(self, names: Iterable[str]) -> list[str]:
        """Names from ``names`` that have no registered factory."""
        return [name for name in names if name not in self._factories]

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)
