"""Media playback events reported by transport-control sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .media_source import MediaSource


class PlaybackState(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    STOPPED = "stopped"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MediaMetadata:
    """Track information published by a media session."""

    title: str = ""
    artist: str = ""
    album_title: str = ""
    album_artist: str = ""
    subtitle: str = ""
    track_number: int = 0

    def fingerprint(self) -> str:
        """A string that changes whenever any metadata field changes."""
        return "\x1f".join(
            (
                self.title,
                self.artist,
                self.album_title,
                self.album_artist,
                self.subtitle,
                str(self.track_number),
            )
        )


class MediaEventKind(Enum):
    MEDIA_STARTED = "MediaStarted"
    MEDIA_PAUSED = "MediaPaused"
    MEDIA_STOPPED = "MediaStopped"
    MEDIA_METADATA_CHANGED = "MediaMetadataChanged"
    ACTIVE_SESSION_CHANGED = "ActiveSessionChanged"


@dataclass(frozen=True)
class MediaEvent:
    """A playback event; only ActiveSessionChanged may lack a source."""

    kind: MediaEventKind
    source: MediaSource | None
    metadata: MediaMetadata = field(default_factory=MediaMetadata)

    def __post_init__(self) -> None:
        if self.source is None and self.kind is not MediaEventKind.ACTIVE_SESSION_CHANGED:
            raise ValueError(f"{self.kind.value} event requires a media source")

    def name(self) -> str:
        return self.kind.value