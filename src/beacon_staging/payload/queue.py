"""FIFO buffer for serialized payloads awaiting dispatch."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass(eq=False)
class PayloadQueue:
    """
    Ordered buffer of wire-ready payload strings.

    Insertion order is dispatch order. There is no capacity bound and no
    deduplication; reads on an empty queue return None instead of raising.
    """
    _items: deque[str] = field(default_factory=deque, init=False)

    # Stats
    _pushed: int = field(default=0, init=False)
    _popped: int = field(default=0, init=False)

    def push(self, payload: str) -> None:
        """Append a payload to the tail."""
        self._items.append(payload)
        self._pushed += 1

    def peek(self) -> str | None:
        """Head of the queue without removing it."""
        return self._items[0] if self._items else None

    def pop(self) -> str | None:
        """Remove and return the head of the queue."""
        if not self._items:
            return None
        self._popped += 1
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def snapshot(self) -> list[str]:
        """Copy of the current contents in dispatch order."""
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def stats(self) -> dict:
        return {
            "pushed": self._pushed,
            "popped": self._popped,
            "size": len(self._items),
        }
