"""Recognising pause events that the service itself caused."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class SuppressionEntry:
    generation_id: int
    expires_at: float


class SuppressionWindows:
    """Remembers recent self-issued pauses so their echo can be ignored."""

    def __init__(self, window: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._window = window
        self._clock = clock
        self._entries: dict[str, SuppressionEntry] = {}

    def suppress_pause_event(self, source_id: str, generation_id: int) -> None:
        self._entries[source_id] = SuppressionEntry(generation_id, self._clock() + self._window)

    def consume_if_suppressed(self, source_id: str) -> int | None:
        """Return and forget the generation of a live suppression, if any."""
        now = self._clock()
        self._entries = {
            key: entry for key, entry in self._entries.items() if entry.expires_at > now
        }
        entry = self._entries.pop(source_id, None)
        return None if entry is None else entry.generation_id