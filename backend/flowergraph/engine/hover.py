"""HoverCoordinator — the single shared focus state of one rendered graph.

Two independent tracks:

- label: ``None`` or one petal label. ``enter_label`` overwrites (last write
  wins, no intervening leave needed); ``leave_label`` resets to ``None``.
- types: a tuple of type strings, initially empty. ``enter_types`` replaces
  the whole set; ``leave_types`` resets to ``()``.

Any renderer may write; every renderer reads. Observers registered with
``subscribe`` get the full ``HoverState`` after each change. The optional
``on_hover_label`` / ``on_hover_types`` callbacks fire only when their own
track changes. Nothing internal depends on any listener being present.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_OFF_FOCUS_OPACITY = 0.4


@dataclass(frozen=True)
class HoverState:
    label: str | None = None
    types: tuple[str, ...] = ()

    @property
    def active(self) -> bool:
        return self.label is not None or bool(self.types)


HoverListener = Callable[[HoverState], None]


class HoverCoordinator:
    def __init__(
        self,
        off_focus_opacity: float = DEFAULT_OFF_FOCUS_OPACITY,
        on_hover_label: Callable[[str | None], None] | None = None,
        on_hover_types: Callable[[list[str]], None] | None = None,
    ) -> None:
        self.off_focus_opacity = off_focus_opacity
        self.on_hover_label = on_hover_label
        self.on_hover_types = on_hover_types
        self._state = HoverState()
        self._listeners: list[HoverListener] = []

    @property
    def state(self) -> HoverState:
        return self._state

    @property
    def label(self) -> str | None:
        return self._state.label

    @property
    def types(self) -> tuple[str, ...]:
        return self._state.types

    # ── writers ──────────────────────────────────────────────────────────

    def enter_label(self, label: str) -> None:
        self._set(label=label, types=self._state.types)

    def leave_label(self) -> None:
        self._set(label=None, types=self._state.types)

    def enter_types(self, types: Iterable[str]) -> None:
        self._set(label=self._state.label, types=tuple(types))

    def leave_types(self) -> None:
        self._set(label=self._state.label, types=())

    def reset(self) -> None:
        self._set(label=None, types=())

    def _set(self, label: str | None, types: tuple[str, ...]) -> None:
        previous = self._state
        new = HoverState(label=label, types=types)
        if new == previous:
            return
        self._state = new
        logger.debug("Hover: label=%r types=%r", new.label, new.types)

        if new.label != previous.label and self.on_hover_label is not None:
            self.on_hover_label(new.label)
        if new.types != previous.types and self.on_hover_types is not None:
            self.on_hover_types(list(new.types))
        for listener in list(self._listeners):
            listener(new)

    # ── observers ────────────────────────────────────────────────────────

    def subscribe(self, listener: HoverListener) -> Callable[[], None]:
        """Register a listener. Returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ── readers ──────────────────────────────────────────────────────────

    def is_focused(self, types: Iterable[str] = (), label: str | None = None) -> bool:
        """True when nothing is hovered, or the element matches either track."""
        state = self._state
        if not state.active:
            return True
        if label is not None and label == state.label:
            return True
        return any(t in state.types for t in types)

    def opacity_for(self, types: Iterable[str] = (), label: str | None = None) -> float:
        return 1.0 if self.is_focused(types, label) else self.off_focus_opacity
