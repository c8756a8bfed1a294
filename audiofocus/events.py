"""Audio session snapshots and the events derived from them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

AUDIO_ACTIVITY_THRESHOLD = 0.001

_STATE_NAMES = {0: "inactive", 1: "active", 2: "expired"}


@dataclass(frozen=True)
class SessionState:
    """State of an audio session, identified by its system state code."""

    code: int

    def is_active(self) -> bool:
        return self.code == 1

    def is_expired(self) -> bool:
        return self.code == 2

    def __str__(self) -> str:
        return _STATE_NAMES.get(self.code, f"unknown({self.code})")


SessionState.INACTIVE = SessionState(0)
SessionState.ACTIVE = SessionState(1)
SessionState.EXPIRED = SessionState(2)


@dataclass(frozen=True)
class AudioSessionSnapshot:
    """One process's aggregated audio session state at a poll."""

    process_id: int
    display_name: str
    state: SessionState
    peak: float
    session_count: int = 1

    def is_live(self) -> bool:
        return not self.state.is_expired()

    def is_active(self) -> bool:
        return self.state.is_active()

    def is_audible(self) -> bool:
        return self.peak > AUDIO_ACTIVITY_THRESHOLD


class AudioSessionEventKind(Enum):
    SESSION_STARTED = "SessionStarted"
    SESSION_STOPPED = "SessionStopped"
    SESSION_BECAME_ACTIVE = "SessionBecameActive"
    SESSION_BECAME_INACTIVE = "SessionBecameInactive"


@dataclass(frozen=True)
class AudioSessionEvent:
    """A change observed in an audio session between polls."""

    kind: AudioSessionEventKind
    snapshot: AudioSessionSnapshot

    def name(self) -> str:
        return self.kind.value