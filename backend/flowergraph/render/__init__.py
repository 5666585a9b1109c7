"""Ring renderers — each emits one SVG group as element dicts."""

from flowergraph.render.connections import ConnectionsRenderer
from flowergraph.render.legend import LegendRenderer
from flowergraph.render.petals import PetalsRenderer
from flowergraph.render.roots import RootsRenderer

__all__ = ["ConnectionsRenderer", "LegendRenderer", "PetalsRenderer", "RootsRenderer"]
