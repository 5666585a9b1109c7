"""Tests for record accessors."""

import pytest

from flowergraph.engine.accessors import (
    FunctionAccessor,
    KeyAccessor,
    RecordAccessor,
    record_types,
    snapshot,
)


def test_key_accessor_defaults():
    accessor = KeyAccessor()
    assert accessor.label({"label": 7, "types": ["a"]}) == "7"
    assert accessor.types({"label": "x"}) is None


def test_key_accessor_missing_label_raises():
    with pytest.raises(KeyError):
        KeyAccessor().label({"name": "x"})


def test_accessors_satisfy_protocol(simple_accessor):
    assert isinstance(KeyAccessor(), RecordAccessor)
    assert isinstance(simple_accessor, RecordAccessor)


def test_snapshot(simple_records, simple_accessor):
    assert snapshot(simple_records, simple_accessor) == (("1", ("a", "b")), ("2", ("a",)))


def test_snapshot_equal_for_equal_values(simple_records, simple_accessor):
    other = FunctionAccessor(label_fn=lambda r: str(r["id"]), types_fn=lambda r: r["type"])
    copied = [dict(r) for r in simple_records]
    assert snapshot(simple_records, simple_accessor) == snapshot(copied, other)


def test_bare_string_type_set_is_rejected():
    with pytest.raises(TypeError):
        record_types(KeyAccessor(), {"label": "x", "types": "backend"})


def test_tuple_type_set_is_accepted():
    assert record_types(KeyAccessor(), {"label": "x", "types": ("a", "b")}) == ("a", "b")
