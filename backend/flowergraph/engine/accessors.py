"""Record accessors — how the engine reads a label and a type set from host data.

The engine never inspects a record directly. Hosts hand it an object with
``label(record)`` and ``types(record)``; whatever those raise propagates
unchanged.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

Record = Any


@runtime_checkable
class RecordAccessor(Protocol):
    def label(self, record: Record) -> str: ...

    def types(self, record: Record) -> Sequence[str] | None: ...


@dataclass(frozen=True)
class KeyAccessor:
    """Reads label and types from mapping records by key."""

    label_key: str = "label"
    type_key: str = "types"

    def label(self, record: Mapping[str, Any]) -> str:
        return str(record[self.label_key])

    def types(self, record: Mapping[str, Any]) -> Sequence[str] | None:
        return record.get(self.type_key)


@dataclass(frozen=True)
class FunctionAccessor:
    """Wraps two caller-supplied functions."""

    label_fn: Callable[[Record], str]
    types_fn: Callable[[Record], Sequence[str] | None]

    def label(self, record: Record) -> str:
        return self.label_fn(record)

    def types(self, record: Record) -> Sequence[str] | None:
        return self.types_fn(record)


def record_types(accessor: RecordAccessor, record: Record) -> tuple[str, ...]:
    """Type set of a record as a tuple. Missing/None → empty.

    A bare string is rejected rather than split into characters.
    """
    types = accessor.types(record)
    if isinstance(types, (str, bytes)):
        raise TypeError(f"type set must be a sequence of strings, got {types!r}")
    return tuple(types or ())


def snapshot(records: Sequence[Record], accessor: RecordAccessor) -> tuple[tuple[str, tuple[str, ...]], ...]:
    """Value-level fingerprint of what the engine sees in ``records``.

    Used as the memo key for everything derived from the record set, so two
    equal-valued record lists share cached results regardless of identity.
    """
    return tuple((accessor.label(r), record_types(accessor, r)) for r in records)
