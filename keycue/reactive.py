"""Observable values used for localized text that may change at runtime."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterable, Iterator, List, Tuple

from PySide6.QtCore import QObject, Signal

LOGGER = logging.getLogger(__name__)

Listener = Callable[[Any], None]


class ReadOnlyProperty(QObject):
    """A value that notifies listeners through ``changed`` when it is updated."""

    changed = Signal()

    def __init__(self) -> None:
        super().__init__()
        self._listeners: Dict[Listener, Callable[[], None]] = {}

    @property
    def value(self) -> Any:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------
    def link(self, listener: Listener) -> None:
        """Call ``listener`` with the current value now and after every change."""

        if self.has_listener(listener):
            return

        def _notify() -> None:
            listener(self.value)

        self._listeners[listener] = _notify
        self.changed.connect(_notify)
        listener(self.value)

    def lazy_link(self, listener: Listener) -> None:
        """Like :meth:`link` but without the initial call."""

        if self.has_listener(listener):
            return

        def _notify() -> None:
            listener(self.value)

        self._listeners[listener] = _notify
        self.changed.connect(_notify)

    def unlink(self, listener: Listener) -> None:
        wrapper = self._listeners.pop(listener, None)
        if wrapper is not None:
            self.changed.disconnect(wrapper)

    def has_listener(self, listener: Listener) -> bool:
        return listener in self._listeners

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    @contextmanager
    def linked(self, listener: Listener) -> Iterator["ReadOnlyProperty"]:
        """Scope an observer to a ``with`` block, detaching it on exit."""

        self.link(listener)
        try:
            yield self
        finally:
            self.unlink(listener)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Property(ReadOnlyProperty):
    """A settable observable value."""

    def __init__(self, value: Any) -> None:
        super().__init__()
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, new_value: Any) -> None:
        if new_value == self._value:
            return
        self._value = new_value
        self.changed.emit()


class DerivedProperty(ReadOnlyProperty):
    """Memoized value computed from an explicit list of dependencies.

    The derivation is only re-run when the value is read after one of the
    dependencies changed; reading a stale value recomputes it synchronously.
    A dependency change is forwarded through ``changed`` immediately so that
    observers of this property can refresh themselves.
    """

    def __init__(self, dependencies: Iterable[ReadOnlyProperty], derivation: Callable[[], Any]) -> None:
        super().__init__()
        self._dependencies: Tuple[ReadOnlyProperty, ...] = tuple(_unique(dependencies))
        self._derivation = derivation
        self._stale = True
        self._value: Any = None
        self._disposed = False
        self.recompute_count = 0
        self._slot = self._dependency_changed
        for dependency in self._dependencies:
            dependency.changed.connect(self._slot)

    @property
    def dependencies(self) -> Tuple[ReadOnlyProperty, ...]:
        return self._dependencies

    @property
    def value(self) -> Any:
        if self._stale:
            self._value = self._derivation()
            self.recompute_count += 1
            self._stale = False
        return self._value

    @property
    def is_stale(self) -> bool:
        return self._stale

    def _dependency_changed(self) -> None:
        self._stale = True
        self.changed.emit()

    def dispose(self) -> None:
        """Detach from all dependencies and drop remaining listeners."""

        if self._disposed:
            return
        for dependency in self._dependencies:
            dependency.changed.disconnect(self._slot)
        for listener in list(self._listeners):
            self.unlink(listener)
        self._disposed = True
        LOGGER.debug("Disposed derived property with %d dependencies", len(self._dependencies))

    @property
    def is_disposed(self) -> bool:
        return self._disposed


def _unique(items: Iterable[ReadOnlyProperty]) -> List[ReadOnlyProperty]:
    unique: List[ReadOnlyProperty] = []
    seen: set[int] = set()
    for item in items:
        if id(item) not in seen:
            seen.add(id(item))
            unique.append(item)
    return unique


__all__ = ["DerivedProperty", "Property", "ReadOnlyProperty"]
