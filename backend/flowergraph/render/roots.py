"""Roots renderer — one colored node per type on the outer ring."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from flowergraph.engine.hover import HoverCoordinator
from flowergraph.engine.layout import GraphPosition, Root
from flowergraph.engine.legend import LegendEntry
from flowergraph.models.options import RootsOptions
from flowergraph.utils.geometry import polar_to_cartesian, ring_points, text_anchor_for


class RootsRenderer:
    def __init__(
        self,
        entries: Sequence[LegendEntry],
        position: GraphPosition,
        hover: HoverCoordinator,
        font_size: float,
        options: RootsOptions | None = None,
        report: Callable[[list[Root]], None] | None = None,
    ) -> None:
        self.entries = list(entries)
        self.position = position
        self.hover = hover
        self.font_size = font_size
        self.options = options or RootsOptions()
        self.report = report

    def enter(self, type_: str) -> None:
        self.hover.enter_types([type_])

    def leave(self) -> None:
        self.hover.leave_types()

    def compute_roots(self) -> list[Root]:
        angles, points = ring_points(
            self.position.x, self.position.y, self.options.ring_radius, len(self.entries)
        )
        return [
            Root(type=e.type, color=e.color, angle=float(a), x=float(p[0]), y=float(p[1]))
            for e, a, p in zip(self.entries, angles, points)
        ]

    def render(self) -> dict[str, Any]:
        roots = self.compute_roots()
        if self.report is not None:
            self.report(roots)

        opts = self.options
        nodes = []
        for root in roots:
            children: list[dict[str, Any]] = [{
                "tag": "circle",
                "cx": root.x,
                "cy": root.y,
                "r": opts.node_radius,
                "fill": root.color,
            }]
            if opts.show_labels:
                lx, ly = polar_to_cartesian(
                    self.position.x,
                    self.position.y,
                    opts.ring_radius + opts.node_radius + self.font_size / 2,
                    [root.angle],
                )[0]
                children.append({
                    "tag": "text",
                    "x": float(lx),
                    "y": float(ly),
                    "font-size": self.font_size,
                    "text-anchor": text_anchor_for(root.angle),
                    "text": root.type,
                })
            nodes.append({
                "tag": "g",
                "class": "root",
                "data-type": root.type,
                "opacity": self.hover.opacity_for(types=[root.type]),
                "children": children,
            })

        return {"tag": "g", "class": "roots", "children": nodes}
