"""Tests for dependency-keyed memoization."""

from flowergraph.engine.memo import Memo


def test_recomputes_only_on_change():
    calls = []
    memo = Memo("test")

    def compute():
        calls.append(1)
        return len(calls)

    assert memo.get((1, "a"), compute) == 1
    assert memo.get((1, "a"), compute) == 1
    assert memo.get((2, "a"), compute) == 2
    assert memo.computations == 2


def test_value_keys_not_identity():
    memo = Memo("test")
    memo.get(((("x", ("a",)),),), lambda: "first")
    assert memo.get(((("x", ("a",)),),), lambda: "second") == "first"
