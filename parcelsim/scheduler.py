"""Priority queue of simulation events."""

from __future__ import annotations

import heapq
import itertools

from .events import Event


class EventScheduler:
    """Min-heap of events ordered by their priority key."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Event]] = []
        self._counter = itertools.count()

    def push(self, event: Event) -> None:
        """Schedule an event."""
        heapq.heappush(self._heap, (event.priority_key(), next(self._counter), event))

    def pop(self) -> Event | None:
        """Remove and return the event with the smallest key, or None if empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)