"""Legend renderer — one swatch + label per type, in canonical order. Never rotated."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from flowergraph.engine.hover import HoverCoordinator
from flowergraph.engine.legend import LegendEntry
from flowergraph.models.options import LegendOptions


class LegendRenderer:
    def __init__(
        self,
        entries: Sequence[LegendEntry],
        hover: HoverCoordinator,
        width: float,
        font_size: float,
        options: LegendOptions | None = None,
    ) -> None:
        self.entries = list(entries)
        self.hover = hover
        self.width = width
        self.font_size = font_size
        self.options = options or LegendOptions()

    def enter(self, type_: str) -> None:
        self.hover.enter_types([type_])

    def leave(self) -> None:
        self.hover.leave_types()

    def render(self) -> dict[str, Any]:
        opts = self.options
        item_height = opts.item_height or self.font_size * 2
        column_width = opts.column_width or (self.width - 2 * opts.x) / opts.columns
        swatch = opts.swatch_size or self.font_size

        items = []
        for i, entry in enumerate(self.entries):
            col, row = i % opts.columns, i // opts.columns
            x = opts.x + col * column_width
            y = opts.y + row * item_height
            items.append({
                "tag": "g",
                "class": "legend-item",
                "data-type": entry.type,
                "opacity": self.hover.opacity_for(types=[entry.type]),
                "children": [
                    {
                        "tag": "rect",
                        "x": x,
                        "y": y,
                        "width": swatch,
                        "height": swatch,
                        "fill": entry.color,
                    },
                    {
                        "tag": "text",
                        "x": x + swatch * 1.5,
                        "y": y + swatch,
                        "font-size": self.font_size,
                        "text": f"{entry.type} ({entry.count})",
                    },
                ],
            })

        return {"tag": "g", "class": "legend", "children": items}
