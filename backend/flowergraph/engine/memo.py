"""Dependency-keyed memoization for derived values.

A ``Memo`` holds one cached value and the tuple of dependency values it was
computed from. ``get(deps, fn)`` recomputes only when ``deps`` compares
unequal to the stored key.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()


class Memo(Generic[T]):
    """Single-slot cache keyed by a tuple of dependency values."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._key: object = _UNSET
        self._value: T | None = None
        self.computations = 0

    def get(self, deps: tuple[Hashable, ...], fn: Callable[[], T]) -> T:
        if self._key is _UNSET or self._key != deps:
            self._value = fn()
            self._key = deps
            self.computations += 1
            logger.debug("Memo %s recomputed (#%d)", self.name, self.computations)
        return self._value  # type: ignore[return-value]
