"""Resolve layout templates into concrete screen regions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from paneboard.layout.templates import Column, LayoutTemplate, Leaf, Node, Row, Space, Span


@dataclass(frozen=True)
class ResolvedRegion:
    """A rectangle of the viewport assigned to one layout leaf."""
    template: Leaf
    width: int
    height: int
    x: int
    y: int

    @property
    def pane(self) -> Optional[str]:
        """Pane name, or None for blank space."""
        return self.template.pane if isinstance(self.template, Span) else None

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def right(self) -> int:
        return self.x + self.width


def split(total: int, weights: Sequence[int]) -> list[int]:
    """
    Split ``total`` cells proportionally to ``weights``.

    Each share is rounded down and the leftover goes to the last entry, so
    the shares always add up to ``total``.
    """
    total = max(0, total)
    weight_sum = sum(weights)
    shares = [total * weight // weight_sum for weight in weights]
    shares[-1] += total - sum(shares)
    return shares


def resolve(node: Node, width: int, height: int, x: int = 0, y: int = 0) -> list[ResolvedRegion]:
    """Partition the rectangle (width, height, x, y) following ``node``."""
    width = max(0, width)
    height = max(0, height)

    if isinstance(node, (Span, Space)):
        return [ResolvedRegion(node, width, height, x, y)]

    regions: list[ResolvedRegion] = []
    weights = [child.weight for child in node.children]
    if isinstance(node, Row):
        offset = y
        for child, share in zip(node.children, split(height, weights)):
            regions.extend(resolve(child, width, share, x, offset))
            offset += share
    elif isinstance(node, Column):
        offset = x
        for child, share in zip(node.children, split(width, weights)):
            regions.extend(resolve(child, share, height, offset, y))
            offset += share
    else:
        raise TypeError(f"Unsupported layout node: {node!r}")
    return regions


def resolve_layout(template: LayoutTemplate, width: int, height: int) -> list[ResolvedRegion]:
    """Resolve a whole template against a viewport anchored at the origin."""
    return resolve(template.root, width, height, 0, 0)
