"""Bounded log of simulation events for presentation layers."""

from __future__ import annotations

import threading
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SimEvent:
    """A single simulation event (spawn, combat, death)."""

    tick: int
    category: str
    message: str
    actor_ids: tuple[int, ...] = ()


class EventLog:
    """Ring buffer of the most recent events.

    The tick loop appends; a viewer may read from another thread, so
    reads return copies taken under a lock.
    """

    __slots__ = ("_buffer", "_lock")

    def __init__(self, maxlen: int | None = 2000) -> None:
        self._buffer: deque[SimEvent] = deque(maxlen=maxlen)
        self._lock = threading.Lock()

    def append(self, event: SimEvent) -> None:
        with self._lock:
            self._buffer.append(event)

    def since_tick(self, tick: int) -> list[SimEvent]:
        """Return all retained events with tick >= *tick*."""
        with self._lock:
            return [e for e in self._buffer if e.tick >= tick]

    def by_category(self, category: str) -> list[SimEvent]:
        with self._lock:
            return [e for e in self._buffer if e.category == category]

    def latest(self, count: int = 50) -> list[SimEvent]:
        """Return the *count* most recent events."""
        with self._lock:
            items = list(self._buffer)
        return items[-count:]

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)

    def clear(self) -> None:
        with self._lock:
            self._buffer.clear()
