"""Shared test fixtures."""

from __future__ import annotations

import pytest

from flowergraph.engine.accessors import FunctionAccessor, KeyAccessor


# Two records, two types: the worked example
SIMPLE_RECORDS = [
    {"id": 1, "type": ["a", "b"]},
    {"id": 2, "type": ["a"]},
]

# Overlapping types with a tie (frontend/backend both 2) and an untyped record
TEAM_RECORDS = [
    {"label": "api-gateway", "types": ["backend", "infra"]},
    {"label": "web-app", "types": ["frontend"]},
    {"label": "design-system", "types": ["frontend", "design"]},
    {"label": "billing", "types": ["backend", "infra", "payments"]},
    {"label": "scratchpad", "types": []},
    {"label": "terraform", "types": ["infra"]},
]


@pytest.fixture
def simple_records() -> list[dict]:
    return [dict(r) for r in SIMPLE_RECORDS]


@pytest.fixture
def simple_accessor() -> FunctionAccessor:
    return FunctionAccessor(label_fn=lambda r: str(r["id"]), types_fn=lambda r: r["type"])


@pytest.fixture
def team_records() -> list[dict]:
    return [dict(r) for r in TEAM_RECORDS]


@pytest.fixture
def key_accessor() -> KeyAccessor:
    return KeyAccessor()
