"""Staging facade used by the session layer."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from .completion import CompletionBroadcaster
from .config import StagingConfig
from .identifiers import DefaultRandomSource, IdentifierGenerator, RandomSource, create_generator
from .payload.query import PayloadQueryBuilder
from .payload.queue import PayloadQueue
from .payload.size import byte_length


logger = logging.getLogger(__name__)


@dataclass(eq=False)
class PayloadStager:
    """
    Buffers payloads for one session until the transport flushes them.

    Wires the staging primitives together from a ``StagingConfig``:
    - session and sequence number generators
    - the outbound payload queue with a per-payload size budget
    - a completion broadcaster per flush cycle

    Usage:
        stager = PayloadStager()
        stager.stage(events.start_session(stager.next_sequence_number()))
        stager.on_flush(lambda ok: ...)
        payloads = stager.drain()   # hand off to the transport
        stager.complete_flush(True)
    """
    config: StagingConfig = field(default_factory=StagingConfig)

    # Overrides the configured random source (tests, embedding hosts)
    random_source: RandomSource | None = None

    _session_ids: IdentifierGenerator = field(init=False)
    _sequence_ids: IdentifierGenerator = field(init=False)
    _queue: PayloadQueue = field(default_factory=PayloadQueue, init=False)
    _flush: CompletionBroadcaster[bool] = field(init=False)
    _stats: dict = field(default_factory=dict, init=False)

    def __post_init__(self):
        source = self.random_source
        if source is None and self.config.identifiers.random_seed is not None:
            source = DefaultRandomSource(seed=self.config.identifiers.random_seed)

        self._session_ids = create_generator(self.config.identifiers.session_strategy, source)
        self._sequence_ids = create_generator(self.config.identifiers.sequence_strategy, source)
        self._flush = CompletionBroadcaster(name="flush")
        self._stats = {
            "staged": 0,
            "dropped": 0,
            "flushes": 0,
        }

    def next_session_number(self) -> int:
        return self._session_ids.next()

    def next_sequence_number(self) -> int:
        return self._sequence_ids.next()

    def payload_builder(self) -> PayloadQueryBuilder:
        """Payload builder using the configured value length limit."""
        return PayloadQueryBuilder(max_value_length=self.config.encoding.max_value_length)

    def stage(self, payload: str) -> bool:
        """
        Queue a payload for the next flush.

        Returns True if queued, False if dropped for exceeding the
        configured payload size.
        """
        size = byte_length(payload)
        if size > self.config.queue.max_payload_bytes:
            logger.warning(
                f"Dropping payload of {size} bytes (limit={self.config.queue.max_payload_bytes})"
            )
            self._stats["dropped"] += 1
            return False

        self._queue.push(payload)
        self._stats["staged"] += 1
        return True

    def peek(self) -> str | None:
        return self._queue.peek()

    def drain(self) -> list[str]:
        """Remove and return every queued payload in FIFO order."""
        payloads = []
        while not self._queue.is_empty():
            payloads.append(self._queue.pop())
        return payloads

    def on_flush(self, listener: Callable[[bool], object]) -> None:
        """Call ``listener`` once with the outcome of the next flush."""
        self._flush.add(listener)

    def cancel_flush_listener(self, listener: Callable[[bool], object]) -> None:
        self._flush.remove(listener)

    def complete_flush(self, success: bool) -> None:
        """
        Report the outcome of a flush to waiting listeners.

        Listeners registered afterwards wait for the following flush.
        """
        broadcaster = self._flush
        self._flush = CompletionBroadcaster(name="flush")
        self._stats["flushes"] += 1
        logger.info(f"Flush completed (success={success}, pending={len(self._queue)})")
        broadcaster.resolve(success)

    @property
    def is_empty(self) -> bool:
        return self._queue.is_empty()

    @property
    def stats(self) -> dict:
        """Get stager statistics."""
        return {
            **self._stats,
            "queue": self._queue.stats,
            "flush_listeners": len(self._flush),
        }
