"""Changes to playback ownership in the arbitration state."""

from __future__ import annotations

import time
from dataclasses import replace

from ..media_source import MediaSource
from .state import ArbitrationState, PauseCommandRecord, PauseOrigin


def promote_active(state: ArbitrationState, source: MediaSource, generation_id: int) -> None:
    record = state.upsert_source(source)
    record.last_started_at = time.monotonic()
    record.generation_id = generation_id
    state.currently_active_source = source.id
    state.push_history(source.id, "MediaStarted")


def mark_paused_by_audiofocus(
    state: ArbitrationState,
    paused_source: MediaSource,
    requested_by: MediaSource,
    generation_id: int,
    rollback_active_on_failure: bool,
) -> None:
    record = PauseCommandRecord(
        paused_source=paused_source,
        requested_by=requested_by,
        requested_at=time.monotonic(),
        completed=False,
        rollback_active_on_failure=rollback_active_on_failure,
    )
    state.pending_pauses[generation_id] = record
    state.previously_paused_sources[paused_source.id] = replace(record)


def mark_pause_observed(state: ArbitrationState, source_id: str, origin: PauseOrigin) -> None:
    record = state.sources.get(source_id)
    if record is not None:
        record.last_paused_at = time.monotonic()
        record.last_pause_origin = origin
    if state.currently_active_source == source_id:
        state.currently_active_source = None
    state.push_history(source_id, "MediaPaused")


def remove_source(state: ArbitrationState, source_id: str, event_name: str) -> None:
    state.sources.pop(source_id, None)
    state.previously_paused_sources.pop(source_id, None)
    involved = [
        generation
        for generation, pause in state.pending_pauses.items()
        if source_id in (pause.paused_source.id, pause.requested_by.id)
    ]
    for generation in involved:
        del state.pending_pauses[generation]
    if state.currently_active_source == source_id:
        state.currently_active_source = None
    state.push_history(source_id, event_name)