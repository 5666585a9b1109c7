"""Petals renderer — one node per record on the inner circle."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from flowergraph.engine.hover import HoverCoordinator
from flowergraph.engine.layout import GraphPosition, Petal
from flowergraph.engine.projection import ProjectedRecord
from flowergraph.models.options import CircleOptions, PetalsOptions
from flowergraph.utils.geometry import polar_to_cartesian, ring_points, text_anchor_for

# Fill for a record that belongs to no type
UNTYPED_FILL = "#999999"


class PetalsRenderer:
    def __init__(
        self,
        records: Sequence[ProjectedRecord],
        position: GraphPosition,
        hover: HoverCoordinator,
        font_size: float,
        options: PetalsOptions | None = None,
        inner_circle: CircleOptions | None = None,
        report: Callable[[list[Petal]], None] | None = None,
    ) -> None:
        self.records = list(records)
        self.position = position
        self.hover = hover
        self.font_size = font_size
        self.options = options or PetalsOptions()
        self.inner_circle = inner_circle or CircleOptions()
        self.report = report

    def enter(self, label: str) -> None:
        """Hovering a petal focuses its label and all of its types."""
        self.hover.enter_label(label)
        for record in self.records:
            if record.label == label:
                self.hover.enter_types(record.type_names)
                break
        else:
            self.hover.enter_types(())

    def leave(self) -> None:
        self.hover.leave_label()
        self.hover.leave_types()

    def compute_petals(self) -> list[Petal]:
        angles, points = ring_points(
            self.position.x, self.position.y, self.inner_circle.radius, len(self.records)
        )
        return [
            Petal(label=r.label, types=r.type_names, angle=float(a), x=float(p[0]), y=float(p[1]))
            for r, a, p in zip(self.records, angles, points)
        ]

    def render(self) -> dict[str, Any]:
        petals = self.compute_petals()
        if self.report is not None:
            self.report(petals)

        circle = self.inner_circle
        children: list[dict[str, Any]] = []
        if circle.visible:
            children.append({
                "tag": "circle",
                "class": "inner-circle",
                "cx": self.position.x,
                "cy": self.position.y,
                "r": circle.radius,
                "fill": "none",
                "stroke": circle.stroke,
                "stroke-width": circle.stroke_width,
            })

        opts = self.options
        for record, petal in zip(self.records, petals):
            fill = record.types[0].color if record.types else UNTYPED_FILL
            nodes: list[dict[str, Any]] = [{
                "tag": "circle",
                "cx": petal.x,
                "cy": petal.y,
                "r": opts.node_radius,
                "fill": fill,
            }]
            if opts.show_labels:
                # Labels sit inside the ring, reading toward the center
                lx, ly = polar_to_cartesian(
                    self.position.x,
                    self.position.y,
                    circle.radius - opts.node_radius - self.font_size / 2,
                    [petal.angle],
                )[0]
                nodes.append({
                    "tag": "text",
                    "x": float(lx),
                    "y": float(ly),
                    "font-size": self.font_size,
                    "text-anchor": "end" if text_anchor_for(petal.angle) == "start" else "start",
                    "text": petal.label,
                })
            children.append({
                "tag": "g",
                "class": "petal",
                "data-label": petal.label,
                "data-types": " ".join(petal.types),
                "opacity": self.hover.opacity_for(types=petal.types, label=petal.label),
                "children": nodes,
            })

        return {"tag": "g", "class": "petals", "children": children}
