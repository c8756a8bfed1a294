"""Protection against pausing the same source over and over."""

from __future__ import annotations

import time
from collections.abc import Callable

from audiofocus.hardening.storm import EventStormProtector


class PauseLoopGuard:
    """Allows at most a fixed number of pauses per source within a window."""

    def __init__(
        self,
        window: float,
        max_pauses_per_window: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._window = window
        self._limit = max_pauses_per_window
        self._clock = clock
        self._per_source: dict[str, EventStormProtector] = {}

    def allow_pause(self, source_id: str) -> bool:
        guard = self._per_source.get(source_id)
        if guard is None:
            guard = EventStormProtector(
                self._window,
                self._limit,
                self._clock,
                message=f"arbitration pause loop guard blocked pause command for {source_id}",
            )
            self._per_source[source_id] = guard
        return guard.check_and_record()