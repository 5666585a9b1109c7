"""Connections renderer — a curve from each petal to each of its roots.

Reads only the positions reported by the roots and petals renderers. Focus:
a hovered label focuses that petal's curves only; otherwise hovered types
focus curves into those roots; with nothing hovered everything is focused.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from flowergraph.engine.hover import HoverCoordinator
from flowergraph.engine.layout import GraphPosition, Petal, Root

# Control point sits this fraction of the way from the center to the chord midpoint
_CURVE_PULL = 0.5


class ConnectionsRenderer:
    def __init__(
        self,
        roots: Sequence[Root],
        petals: Sequence[Petal],
        hover: HoverCoordinator,
        center: GraphPosition,
        stroke_width: float = 1.0,
    ) -> None:
        self.roots = {r.type: r for r in roots}
        self.petals = list(petals)
        self.hover = hover
        self.center = center
        self.stroke_width = stroke_width

    def is_focused(self, petal: Petal, root: Root) -> bool:
        state = self.hover.state
        if state.label is not None:
            return petal.label == state.label
        if state.types:
            return root.type in state.types
        return True

    def path_for(self, petal: Petal, root: Root) -> str:
        mx, my = (petal.x + root.x) / 2, (petal.y + root.y) / 2
        qx = self.center.x + (mx - self.center.x) * _CURVE_PULL
        qy = self.center.y + (my - self.center.y) * _CURVE_PULL
        return f"M {petal.x:.2f} {petal.y:.2f} Q {qx:.2f} {qy:.2f} {root.x:.2f} {root.y:.2f}"

    def render(self) -> dict[str, Any]:
        paths = []
        for petal in self.petals:
            for type_ in petal.types:
                root = self.roots.get(type_)
                if root is None:
                    continue
                focused = self.is_focused(petal, root)
                paths.append({
                    "tag": "path",
                    "class": "connection",
                    "d": self.path_for(petal, root),
                    "fill": "none",
                    "stroke": root.color,
                    "stroke-width": self.stroke_width,
                    "data-label": petal.label,
                    "data-type": root.type,
                    "opacity": 1.0 if focused else self.hover.off_focus_opacity,
                })
        return {"tag": "g", "class": "connections", "children": paths}
