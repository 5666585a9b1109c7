"""Record projection — raw records to display-ready (label, legend entries)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from flowergraph.engine.accessors import Record, RecordAccessor, record_types
from flowergraph.engine.legend import LegendEntry


@dataclass(frozen=True)
class ProjectedRecord:
    label: str
    types: tuple[LegendEntry, ...]

    @property
    def type_names(self) -> tuple[str, ...]:
        return tuple(e.type for e in self.types)


def project_records(
    records: Sequence[Record],
    accessor: RecordAccessor,
    legend: Sequence[LegendEntry],
) -> list[ProjectedRecord]:
    """One ProjectedRecord per record; types follow legend order, not accessor order."""
    projected = []
    for record in records:
        own = set(record_types(accessor, record))
        projected.append(
            ProjectedRecord(
                label=accessor.label(record),
                types=tuple(e for e in legend if e.type in own),
            )
        )
    return projected
