"""Type taxonomy: the distinct type labels across all records."""

from __future__ import annotations

from collections.abc import Sequence

from flowergraph.engine.accessors import Record, RecordAccessor, record_types


def extract_types(records: Sequence[Record], accessor: RecordAccessor) -> list[str]:
    """Distinct type strings in first-seen order."""
    seen: set[str] = set()
    types: list[str] = []
    for record in records:
        for t in record_types(accessor, record):
            if t not in seen:
                seen.add(t)
                types.append(t)
    return types
