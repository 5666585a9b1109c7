"""Tests for the ring renderers and the full render pass."""

import math

import pytest

from flowergraph import FlowerGraph, GraphOptions
from flowergraph.engine.hover import HoverCoordinator
from flowergraph.engine.layout import GraphPosition, LayoutOrchestrator, Petal, Root
from flowergraph.engine.legend import LegendEntry
from flowergraph.engine.projection import ProjectedRecord
from flowergraph.render import ConnectionsRenderer, LegendRenderer, PetalsRenderer, RootsRenderer

CENTER = GraphPosition(x=300, y=400)
ENTRIES = [
    LegendEntry(type="a", color="#ff0000", count=2),
    LegendEntry(type="b", color="#00ff00", count=1),
]


def _opacities(group, attr):
    return {c[attr]: c["opacity"] for c in group["children"] if attr in c}


def test_legend_dims_unmatched():
    hover = HoverCoordinator()
    legend = LegendRenderer(ENTRIES, hover, width=600, font_size=6)
    legend.enter("a")
    assert hover.types == ("a",)
    assert _opacities(legend.render(), "data-type") == {"a": 1.0, "b": 0.4}
    legend.leave()
    assert _opacities(legend.render(), "data-type") == {"a": 1.0, "b": 1.0}


def test_legend_keeps_canonical_order():
    group = LegendRenderer(ENTRIES, HoverCoordinator(), width=600, font_size=6).render()
    assert [c["data-type"] for c in group["children"]] == ["a", "b"]


def test_roots_on_outer_ring_and_reported():
    layout = LayoutOrchestrator(CENTER)
    roots = RootsRenderer(ENTRIES, CENTER, HoverCoordinator(), 6, report=layout.update_roots)
    roots.render()

    assert [r.type for r in layout.roots] == ["a", "b"]
    for root in layout.roots:
        assert math.hypot(root.x - CENTER.x, root.y - CENTER.y) == pytest.approx(240)
    assert layout.roots[1].angle == pytest.approx(180)


def test_roots_hover_writes_types():
    hover = HoverCoordinator()
    roots = RootsRenderer(ENTRIES, CENTER, hover, 6)
    roots.enter("b")
    assert _opacities(roots.render(), "data-type") == {"a": 0.4, "b": 1.0}
    roots.leave()
    assert hover.types == ()


def test_petals_on_inner_circle_and_reported():
    records = [
        ProjectedRecord(label="1", types=tuple(ENTRIES)),
        ProjectedRecord(label="2", types=(ENTRIES[0],)),
        ProjectedRecord(label="3", types=()),
    ]
    layout = LayoutOrchestrator(CENTER)
    petals = PetalsRenderer(records, CENTER, HoverCoordinator(), 6, report=layout.update_petals)
    group = petals.render()

    assert [p.label for p in layout.petals] == ["1", "2", "3"]
    for petal in layout.petals:
        assert math.hypot(petal.x - CENTER.x, petal.y - CENTER.y) == pytest.approx(120)
    assert group["children"][0]["class"] == "inner-circle"


def test_petal_hover_sets_label_and_types():
    hover = HoverCoordinator()
    records = [
        ProjectedRecord(label="1", types=tuple(ENTRIES)),
        ProjectedRecord(label="2", types=(ENTRIES[0],)),
        ProjectedRecord(label="3", types=()),
    ]
    petals = PetalsRenderer(records, CENTER, hover, 6)
    petals.enter("2")
    assert hover.label == "2"
    assert hover.types == ("a",)

    opacities = _opacities(petals.render(), "data-label")
    assert opacities == {"1": 1.0, "2": 1.0, "3": 0.4}

    petals.leave()
    assert hover.label is None and hover.types == ()


def test_connections_focus_rules():
    roots = [
        Root(type="a", color="#ff0000", angle=0, x=540, y=400),
        Root(type="b", color="#00ff00", angle=180, x=60, y=400),
    ]
    petals = [
        Petal(label="1", types=("a", "b"), angle=0, x=420, y=400),
        Petal(label="2", types=("a",), angle=180, x=180, y=400),
    ]
    hover = HoverCoordinator()
    connections = ConnectionsRenderer(roots, petals, hover, CENTER)

    def focus_map():
        return {
            (c["data-label"], c["data-type"]): c["opacity"]
            for c in connections.render()["children"]
        }

    assert set(focus_map()) == {("1", "a"), ("1", "b"), ("2", "a")}
    assert set(focus_map().values()) == {1.0}

    hover.enter_types(["b"])
    assert focus_map() == {("1", "a"): 0.4, ("1", "b"): 1.0, ("2", "a"): 0.4}

    hover.enter_label("2")
    assert focus_map() == {("1", "a"): 0.4, ("1", "b"): 0.4, ("2", "a"): 1.0}


def test_connections_skip_unknown_roots():
    petals = [Petal(label="1", types=("ghost",), angle=0, x=0, y=0)]
    group = ConnectionsRenderer([], petals, HoverCoordinator(), CENTER).render()
    assert group["children"] == []


def test_full_render_structure(team_records):
    graph = FlowerGraph(team_records, options=GraphOptions(seed=3))
    result = graph.render()

    assert len(result.roots) == len(result.legend) == 5
    assert len(result.petals) == len(team_records)
    assert result.position == GraphPosition(x=300, y=400)

    svg = result.svg
    assert 'viewBox="0 0 600 700"' in svg
    assert 'transform="rotate(45, 300, 400)"' in svg
    # legend is outside the rotated group; draw order inside it
    assert svg.index('class="legend"') < svg.index('class="graph"')
    assert svg.index('class="connections"') < svg.index('class="petals"') < svg.index('class="roots"')


def test_render_uses_configured_canvas(team_records):
    graph = FlowerGraph(team_records, options=GraphOptions(width=800, height=900, seed=3))
    svg = graph.render().svg
    assert 'viewBox="0 0 800 900"' in svg
    assert 'transform="rotate(45, 400, 500)"' in svg


def test_render_dims_by_hovered_type(simple_records, simple_accessor):
    graph = FlowerGraph(simple_records, simple_accessor, GraphOptions(seed=3))
    graph.hover_types(["b"])
    graph.render()

    roots = graph.renderers["roots"].render()
    assert _opacities(roots, "data-type") == {"a": 0.4, "b": 1.0}
    petals = graph.renderers["petals"].render()
    assert _opacities(petals, "data-label") == {"1": 1.0, "2": 0.4}


def test_petal_hover_without_record_clears_types():
    hover = HoverCoordinator()
    petals = PetalsRenderer([ProjectedRecord(label="1", types=(ENTRIES[0],))], CENTER, hover, 6)
    hover.enter_types(["a"])
    petals.enter("unknown")
    assert hover.label == "unknown"
    assert hover.types == ()


def test_legend_columns_share_inner_width():
    entries = [LegendEntry(type=t, color="#000000", count=1) for t in "abcd"]
    group = LegendRenderer(entries, HoverCoordinator(), width=600, font_size=6).render()
    xs = [item["children"][0]["x"] for item in group["children"]]
    assert xs[0] == pytest.approx(10)
    assert xs[1] == pytest.approx(10 + 580 / 3)
    assert xs[3] == pytest.approx(10)
