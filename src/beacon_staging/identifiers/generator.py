"""Identifier generators for session and sequence numbers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from ..errors import ConfigurationError
from .sources import RandomSource, default_random_source


logger = logging.getLogger(__name__)

# Exclusive upper bound for randomized identifiers
MAX_ID_VALUE = 2 ** 31


class IdStrategy(str, Enum):
    """How a numbering domain picks its first identifier."""
    DEFAULT = "default"  # start at 0, count up
    RANDOM = "random"    # start at a random value, count up, redraw on overflow


class IdentifierGenerator(ABC):
    """
    Produces the next identifier of a counting domain.

    Generators own their state and are not safe for concurrent use;
    callers sharing one generator must serialize calls to ``next()``.
    """

    @abstractmethod
    def next(self) -> int:
        """Return the next identifier."""
        ...


@dataclass
class SequentialIdGenerator(IdentifierGenerator):
    """Counts up from zero: 0, 1, 2, ..."""
    _current: int | None = field(default=None, init=False)

    def next(self) -> int:
        if self._current is None:
            self._current = 0
        else:
            self._current += 1
        return self._current


@dataclass
class RandomSequenceIdGenerator(IdentifierGenerator):
    """
    Counts up from a random starting value.

    The first call draws from the random source. Later calls increment
    the previous value. Whenever the candidate falls outside
    [0, MAX_ID_VALUE) a fresh value is drawn until one is in range, so
    MAX_ID_VALUE - 1 is returned as-is and the following call redraws.

    A source that never yields an in-range value makes ``next()`` loop
    forever.
    """
    random_source: RandomSource = field(default_factory=default_random_source)

    _current: int | None = field(default=None, init=False)

    def next(self) -> int:
        if self._current is None:
            candidate = self.random_source.next_positive_integer()
        else:
            candidate = self._current + 1

        while not 0 <= candidate < MAX_ID_VALUE:
            logger.debug(f"Identifier {candidate} out of range, drawing a new start value")
            candidate = self.random_source.next_positive_integer()

        self._current = candidate
        return candidate


@dataclass(frozen=True)
class FixedIdGenerator(IdentifierGenerator):
    """Always returns the same identifier."""
    value: int

    def next(self) -> int:
        return self.value


def create_generator(
    strategy: IdStrategy | str,
    random_source: RandomSource | None = None,
) -> IdentifierGenerator:
    """
    Create a generator for the configured strategy.

    ``random_source`` is only used by the random strategy and defaults to
    the process-wide source.
    """
    try:
        strategy = IdStrategy(strategy)
    except ValueError:
        raise ConfigurationError(
            f"Unknown identifier strategy: {strategy!r}",
            field_name="strategy",
        ) from None

    if strategy is IdStrategy.RANDOM:
        source = random_source if random_source is not None else default_random_source()
        return RandomSequenceIdGenerator(random_source=source)

    return SequentialIdGenerator()
