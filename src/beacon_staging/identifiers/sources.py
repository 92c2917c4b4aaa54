"""Random number sources for identifier generation."""

from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


logger = logging.getLogger(__name__)

# Upper bound (exclusive) for positive integers drawn from a source
MAX_POSITIVE_INTEGER = 2 ** 31


@runtime_checkable
class RandomSource(Protocol):
    """
    Supplier of random positive integers.

    Implementations must eventually return a value in [0, 2**31).
    """

    def next_positive_integer(self) -> int:
        ...


@dataclass
class DefaultRandomSource:
    """Random source backed by a private ``random.Random`` instance."""
    seed: int | None = None

    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self):
        self._rng = random.Random(self.seed)

    def next_positive_integer(self) -> int:
        """Uniform integer in [0, 2**31)."""
        return self._rng.randrange(0, MAX_POSITIVE_INTEGER)


_default_source: DefaultRandomSource | None = None
_default_lock = threading.Lock()


def default_random_source() -> DefaultRandomSource:
    """
    Process-wide random source.

    Created once on first use and kept for the lifetime of the process.
    """
    global _default_source
    if _default_source is None:
        with _default_lock:
            if _default_source is None:
                _default_source = DefaultRandomSource()
                logger.debug("Created process-wide random source")
    return _default_source
