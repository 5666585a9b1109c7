"""FlowerGraph — wires taxonomy, palette, legend, projection, layout and hover.

Every derived value sits behind a ``Memo`` keyed by the values it depends on:

    types      ← record snapshot
    colors     ← hue, luminosity, type count, seed
    legend     ← types, colors, record snapshot
    projected  ← record snapshot, legend
    position   ← width, height, position override

Hover changes touch none of these keys, so colors and positions stay put while
the pointer moves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from flowergraph.engine.accessors import KeyAccessor, Record, RecordAccessor, snapshot
from flowergraph.engine.hover import HoverCoordinator
from flowergraph.engine.layout import GraphPosition, LayoutOrchestrator, Petal, Root, compute_graph_position
from flowergraph.engine.legend import LegendEntry, rank_legend
from flowergraph.engine.memo import Memo
from flowergraph.engine.palette import assign_colors
from flowergraph.engine.projection import ProjectedRecord, project_records
from flowergraph.engine.taxonomy import extract_types
from flowergraph.models.options import GraphOptions
from flowergraph.render.connections import ConnectionsRenderer
from flowergraph.render.legend import LegendRenderer
from flowergraph.render.petals import PetalsRenderer
from flowergraph.render.roots import RootsRenderer
from flowergraph.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    svg: str
    legend: list[LegendEntry]
    records: list[ProjectedRecord]
    roots: list[Root]
    petals: list[Petal]
    position: GraphPosition


class FlowerGraph:
    def __init__(
        self,
        records: Iterable[Record] = (),
        accessor: RecordAccessor | None = None,
        options: GraphOptions | None = None,
        on_hover_label: Callable[[str | None], None] | None = None,
        on_hover_types: Callable[[list[str]], None] | None = None,
    ) -> None:
        self.options = options or GraphOptions()
        self.hover = HoverCoordinator(
            off_focus_opacity=self.options.off_focus_opacity,
            on_hover_label=on_hover_label,
            on_hover_types=on_hover_types,
        )
        self.memos: dict[str, Memo[Any]] = {
            name: Memo(name) for name in ("types", "colors", "legend", "projected", "position")
        }
        self.layout: LayoutOrchestrator | None = None
        self.renderers: dict[str, Any] = {}
        self.set_data(records, accessor or KeyAccessor())

    # ── inputs ───────────────────────────────────────────────────────────

    def set_data(self, records: Iterable[Record], accessor: RecordAccessor | None = None) -> None:
        """Replace the record set (and optionally the accessor)."""
        if accessor is not None:
            self.accessor = accessor
        self.records: list[Record] = list(records)
        self._snapshot = snapshot(self.records, self.accessor)
        logger.debug("Data set: %d records", len(self.records))

    def update_options(self, **changes: Any) -> GraphOptions:
        """Apply option changes. Nested option groups may be given as dicts."""
        merged = {**self.options.model_dump(), **changes}
        self.options = GraphOptions.model_validate(merged)
        self.hover.off_focus_opacity = self.options.off_focus_opacity
        return self.options

    # ── derived values ───────────────────────────────────────────────────

    @property
    def types(self) -> list[str]:
        return self.memos["types"].get(
            (self._snapshot,), lambda: extract_types(self.records, self.accessor)
        )

    @property
    def colors(self) -> list[str]:
        opts = self.options
        count = len(self.types)
        return self.memos["colors"].get(
            (opts.hue, opts.luminosity, count, opts.seed),
            lambda: assign_colors(count, hue=opts.hue, luminosity=opts.luminosity, seed=opts.seed),
        )

    @property
    def legend(self) -> list[LegendEntry]:
        types, colors = self.types, self.colors
        return self.memos["legend"].get(
            (tuple(types), tuple(colors), self._snapshot),
            lambda: rank_legend(types, colors, self.records, self.accessor),
        )

    @property
    def projected(self) -> list[ProjectedRecord]:
        legend = self.legend
        return self.memos["projected"].get(
            (self._snapshot, tuple(legend)),
            lambda: project_records(self.records, self.accessor, legend),
        )

    @property
    def position(self) -> GraphPosition:
        opts = self.options
        override = opts.graph_position
        return self.memos["position"].get(
            (opts.width, opts.height, override.x, override.y),
            lambda: compute_graph_position(opts.width, opts.height, override.x, override.y),
        )

    def computations(self) -> dict[str, int]:
        return {name: memo.computations for name, memo in self.memos.items()}

    # ── hover shortcuts ──────────────────────────────────────────────────

    def hover_types(self, types: Sequence[str]) -> None:
        self.hover.enter_types(types)

    def hover_label(self, label: str) -> None:
        self.hover.enter_label(label)

    def clear_hover(self) -> None:
        self.hover.reset()

    # ── rendering ────────────────────────────────────────────────────────

    def render(self) -> RenderResult:
        """One full render pass: legend, then the rotated flower group."""
        opts = self.options
        position = self.position
        layout = LayoutOrchestrator(position, opts.graph_rotation)

        legend_r = LegendRenderer(
            self.legend, self.hover, opts.width, opts.font_size, opts.legend
        )
        petals_r = PetalsRenderer(
            self.projected,
            position,
            self.hover,
            opts.font_size,
            opts.petals,
            opts.inner_circle,
            report=layout.update_petals,
        )
        roots_r = RootsRenderer(
            self.legend, position, self.hover, opts.font_size, opts.roots, report=layout.update_roots
        )

        legend_group = legend_r.render()
        petals_group = petals_r.render()
        roots_group = roots_r.render()

        connections_r = ConnectionsRenderer(layout.roots, layout.petals, self.hover, position)
        connections_group = connections_r.render()

        graph_group = {
            "tag": "g",
            "class": "graph",
            "transform": layout.transform,
            # draw order: connections beneath petals beneath roots
            "children": [connections_group, petals_group, roots_group],
        }
        svg = serialize_svg([legend_group, graph_group], canvas_w=opts.width, canvas_h=opts.height)

        self.layout = layout
        self.renderers = {
            "legend": legend_r,
            "roots": roots_r,
            "petals": petals_r,
            "connections": connections_r,
        }
        logger.info(
            "Rendered flower graph: %d types, %d records", len(self.legend), len(self.records)
        )
        return RenderResult(
            svg=svg,
            legend=self.legend,
            records=self.projected,
            roots=list(layout.roots),
            petals=list(layout.petals),
            position=position,
        )
