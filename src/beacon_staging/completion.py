"""One-shot completion notification for buffered work."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[T], Any]


class BroadcastState(str, Enum):
    OPEN = "open"          # Accepting listeners
    RESOLVED = "resolved"  # Terminal, listeners already notified


@dataclass(eq=False)
class CompletionBroadcaster(Generic[T]):
    """
    Notifies every registered listener exactly once.

    Listeners are added and removed while the broadcaster is open.
    ``resolve`` moves it to RESOLVED, calls the listeners registered at
    that moment in registration order and drops them. Later ``resolve``,
    ``add`` and ``remove`` calls do nothing.

    The same listener may be registered more than once; it is then called
    once per registration.
    """
    name: str = "completion"

    _listeners: list[Listener] = field(default_factory=list, init=False)
    _state: BroadcastState = field(default=BroadcastState.OPEN, init=False)

    def add(self, listener: Listener) -> None:
        """Register a listener for the resolution value."""
        if self._state is BroadcastState.RESOLVED:
            logger.debug(f"Broadcaster '{self.name}' already resolved, ignoring add")
            return
        self._listeners.append(listener)

    def remove(self, listener: Listener) -> None:
        """Unregister one occurrence of a listener, if present."""
        if self._state is BroadcastState.RESOLVED:
            logger.debug(f"Broadcaster '{self.name}' already resolved, ignoring remove")
            return
        if listener in self._listeners:
            self._listeners.remove(listener)

    def contains(self, listener: Listener) -> bool:
        return listener in self._listeners

    def resolve(self, value: T) -> None:
        """
        Notify all registered listeners with ``value``.

        Only the first call has an effect. The broadcaster is marked
        resolved before any listener runs, so an exception raised by a
        listener propagates to the caller without re-arming the
        broadcaster; listeners after the failing one are not called.
        """
        if self._state is BroadcastState.RESOLVED:
            logger.debug(f"Broadcaster '{self.name}' already resolved, ignoring resolve")
            return

        listeners = self._listeners
        self._listeners = []
        self._state = BroadcastState.RESOLVED

        logger.debug(f"Resolving broadcaster '{self.name}' for {len(listeners)} listener(s)")
        for listener in listeners:
            listener(value)

    @property
    def state(self) -> BroadcastState:
        return self._state

    @property
    def resolved(self) -> bool:
        return self._state is BroadcastState.RESOLVED

    def __len__(self) -> int:
        return len(self._listeners)
