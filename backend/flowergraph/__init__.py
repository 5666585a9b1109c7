"""FlowerGraph: radial type/record diagram layout and hover coordination."""

from flowergraph.engine.accessors import FunctionAccessor, KeyAccessor
from flowergraph.engine.graph import FlowerGraph, RenderResult
from flowergraph.models.options import GraphOptions

__version__ = "0.1.0"

__all__ = ["FlowerGraph", "RenderResult", "GraphOptions", "KeyAccessor", "FunctionAccessor"]
