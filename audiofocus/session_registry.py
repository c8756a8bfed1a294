"""Tracking of audio sessions across polls, turning snapshots into events."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .events import AudioSessionEvent, AudioSessionEventKind, AudioSessionSnapshot
from .identity.system import IdentitySystem
from .media_source import MediaSource

STOP_CONFIRMATION_POLLS = 3


@dataclass
class _TrackedSession:
    source: MediaSource
    snapshot: AudioSessionSnapshot
    missing_polls: int = 0


def _is_playing(snapshot: AudioSessionSnapshot) -> bool:
    return snapshot.is_active() and snapshot.is_audible()


class AudioSessionRegistry:
    """Remembers the sessions of the last poll and reports what changed.

    A session that disappears is only reported stopped after it has been
    missing for ``STOP_CONFIRMATION_POLLS`` consecutive polls, so that a
    session briefly recreated by its application does not flap.
    """

    def __init__(self, identity_system: IdentitySystem | None = None) -> None:
        self._identity = identity_system if identity_system is not None else IdentitySystem()
        self._sessions: dict[str, _TrackedSession] = {}

    def reconcile(
        self, snapshots: Iterable[AudioSessionSnapshot]
    ) -> list[tuple[AudioSessionEvent, MediaSource]]:
        current: dict[str, _TrackedSession] = {}
        for snapshot in snapshots:
            if not snapshot.is_live():
                continue
            source = self._identity.resolve_wasapi_session(snapshot)
            if source is not None:
                current[source.id] = _TrackedSession(source, snapshot)

        events: list[tuple[AudioSessionEvent, MediaSource]] = []

        for source_id, tracked in current.items():
            if source_id in self._sessions:
                continue
            events.append(
                (AudioSessionEvent(AudioSessionEventKind.SESSION_STARTED, tracked.snapshot), tracked.source)
            )
            if _is_playing(tracked.snapshot):
                events.append(
                    (
                        AudioSessionEvent(AudioSessionEventKind.SESSION_BECAME_ACTIVE, tracked.snapshot),
                        tracked.source,
                    )
                )

        for source_id, tracked in current.items():
            previous = self._sessions.get(source_id)
            if previous is None:
                continue
            was_playing = _is_playing(previous.snapshot)
            is_playing = _is_playing(tracked.snapshot)
            if not was_playing and is_playing:
                kind = AudioSessionEventKind.SESSION_BECAME_ACTIVE
            elif was_playing and not is_playing:
                kind = AudioSessionEventKind.SESSION_BECAME_INACTIVE
            else:
                continue
            events.append((AudioSessionEvent(kind, tracked.snapshot), tracked.source))

        for source_id, tracked in self._sessions.items():
            if source_id in current:
                continue
            missing = tracked.missing_polls + 1
            if missing >= STOP_CONFIRMATION_POLLS:
                events.append(
                    (
                        AudioSessionEvent(AudioSessionEventKind.SESSION_STOPPED, tracked.snapshot),
                        tracked.source,
                    )
                )
            else:
                current[source_id] = _TrackedSession(tracked.source, tracked.snapshot, missing)

        self._sessions = current
        return events

    def __len__(self) -> int:
        return len(self._sessions)