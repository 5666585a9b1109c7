"""FlowerGraph layout and coordination engine."""

from flowergraph.engine.accessors import FunctionAccessor, KeyAccessor, RecordAccessor
from flowergraph.engine.hover import HoverCoordinator, HoverState
from flowergraph.engine.layout import GraphPosition, LayoutOrchestrator, Petal, Root
from flowergraph.engine.legend import LegendEntry, rank_legend
from flowergraph.engine.palette import assign_colors
from flowergraph.engine.projection import ProjectedRecord, project_records
from flowergraph.engine.taxonomy import extract_types

__all__ = [
    "FunctionAccessor",
    "KeyAccessor",
    "RecordAccessor",
    "HoverCoordinator",
    "HoverState",
    "GraphPosition",
    "LayoutOrchestrator",
    "Petal",
    "Root",
    "LegendEntry",
    "rank_legend",
    "assign_colors",
    "ProjectedRecord",
    "project_records",
    "extract_types",
]
