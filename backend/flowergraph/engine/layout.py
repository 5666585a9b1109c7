"""Layout orchestration — shared center, rotation and reported ring positions.

The legend occupies a fixed band at the top of the canvas; the flower is
centered in the area below it. Roots and petals are positioned by their
renderers, which report back through ``update_roots`` / ``update_petals`` so
the connections renderer can draw between them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from flowergraph.svg.serializer import format_number

logger = logging.getLogger(__name__)

# Height reserved above the flower for the legend
LEGEND_BAND = 100.0


@dataclass(frozen=True)
class GraphPosition:
    x: float
    y: float


@dataclass(frozen=True)
class Root:
    type: str
    color: str
    angle: float
    x: float
    y: float


@dataclass(frozen=True)
class Petal:
    label: str
    types: tuple[str, ...]
    angle: float
    x: float
    y: float


def compute_graph_position(
    width: float,
    height: float,
    override_x: float | None = None,
    override_y: float | None = None,
) -> GraphPosition:
    """Center of rotation. Unset override coordinates fall back independently."""
    x = override_x if override_x is not None else width / 2
    y = override_y if override_y is not None else (height - LEGEND_BAND) / 2 + LEGEND_BAND
    return GraphPosition(x=float(x), y=float(y))


def rotation_transform(angle: float, position: GraphPosition) -> str:
    """SVG transform rotating the flower group about the graph position."""
    x, y = format_number(position.x), format_number(position.y)
    return f"rotate({format_number(float(angle))}, {x}, {y})"


class LayoutOrchestrator:
    """Holds the per-render geometry shared by roots, petals and connections."""

    def __init__(self, position: GraphPosition, rotation: float = 45.0) -> None:
        self.position = position
        self.rotation = rotation
        self.roots: list[Root] = []
        self.petals: list[Petal] = []

    @property
    def transform(self) -> str:
        return rotation_transform(self.rotation, self.position)

    def update_roots(self, roots: Sequence[Root]) -> None:
        self.roots = list(roots)
        logger.debug("Layout: %d roots reported", len(self.roots))

    def update_petals(self, petals: Sequence[Petal]) -> None:
        self.petals = list(petals)
        logger.debug("Layout: %d petals reported", len(self.petals))
