"""Ownership state held by the arbitration engine."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass, field
from typing import NamedTuple

from ..media_source import MediaSource

HISTORY_CAPACITY = 256
_MAX_GENERATION = 2**64 - 1


@dataclass(frozen=True)
class PauseOrigin:
    """Who paused a source: the service (with its generation) or, if None, someone else."""

    generation_id: int | None = None


@dataclass
class PlaybackRecord:
    """What the engine knows about one source's playback."""

    source: MediaSource
    last_started_at: float | None = None
    last_paused_at: float | None = None
    last_pause_origin: PauseOrigin | None = None
    generation_id: int = 0


@dataclass
class PauseCommandRecord:
    """A pause the service requested on behalf of another source."""

    paused_source: MediaSource
    requested_by: MediaSource
    requested_at: float
    completed: bool = False
    rollback_active_on_failure: bool = False


@dataclass(frozen=True)
class ArbitrationSnapshot:
    """A read-only summary of the arbitration state."""

    currently_active_source: str | None
    previously_paused_sources: tuple[str, ...]
    event_generation_id: int
    playback_history_len: int


class _HistoryEntry(NamedTuple):
    generation_id: int
    source_id: str
    event_name: str
    at: float


@dataclass(eq=False)
class ArbitrationState:
    """Which source owns playback, and what was paused to make it so."""

    currently_active_source: str | None = None
    sources: dict[str, PlaybackRecord] = field(default_factory=dict)
    previously_paused_sources: dict[str, PauseCommandRecord] = field(default_factory=dict)
    pending_pauses: dict[int, PauseCommandRecord] = field(default_factory=dict)
    playback_history: deque[_HistoryEntry] = field(
        default_factory=lambda: deque(maxlen=HISTORY_CAPACITY)
    )
    event_generation_id: int = 0

    def next_generation(self) -> int:
        self.event_generation_id = min(self.event_generation_id + 1, _MAX_GENERATION)
        return self.event_generation_id

    def upsert_source(self, source: MediaSource) -> PlaybackRecord:
        record = self.sources.get(source.id)
        if record is None:
            record = PlaybackRecord(source)
            self.sources[source.id] = record
        else:
            record.source = source
        return record

    def push_history(self, source_id: str, event_name: str) -> None:
        self.playback_history.append(
            _HistoryEntry(self.event_generation_id, source_id, event_name, time.monotonic())
        )

    def snapshot(self) -> ArbitrationSnapshot:
        return ArbitrationSnapshot(
            currently_active_source=self.currently_active_source,
            previously_paused_sources=tuple(self.previously_paused_sources),
            event_generation_id=self.event_generation_id,
            playback_history_len=len(self.playback_history),
        )