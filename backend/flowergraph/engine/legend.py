"""Legend ranking — joins type, color and frequency into the canonical order."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from flowergraph.engine.accessors import Record, RecordAccessor, record_types


@dataclass(frozen=True)
class LegendEntry:
    type: str
    color: str
    count: int


def rank_legend(
    types: Sequence[str],
    colors: Sequence[str],
    records: Sequence[Record],
    accessor: RecordAccessor,
) -> list[LegendEntry]:
    """Count records per type, then sort by count descending.

    ``sorted`` is stable, so equal counts keep extraction order. The result is
    the canonical type ordering; downstream code must not re-sort it.
    """
    if len(types) != len(colors):
        raise ValueError(f"{len(types)} types but {len(colors)} colors")

    type_sets = [set(record_types(accessor, r)) for r in records]
    entries = [
        LegendEntry(type=t, color=c, count=sum(1 for ts in type_sets if t in ts))
        for t, c in zip(types, colors)
    ]
    return sorted(entries, key=lambda e: e.count, reverse=True)
