"""Classification of media sources by what kind of program they are."""

from __future__ import annotations

import string

from ..media_source import MediaCapability, MediaSourceKind

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_SYSTEM_PROCESSES = frozenset(
    {
        "audiodg.exe",
        "svchost.exe",
        "system",
        "idle",
        "lsass.exe",
        "csrss.exe",
        "wininit.exe",
        "services.exe",
    }
)
# "helper" is deliberately absent: many apps render audio in helper processes.
_IGNORED_MARKERS = ("update", "crashpad", "telemetry", "feedback")
_STREAMING_MARKERS = ("spotify", "netflix", "deezer", "tidal")
_PLAYER_MARKERS = ("vlc", "foobar2000", "wmplayer", "music.ui")


def _lower(name: str) -> str:
    return name.translate(_ASCII_LOWER)


class SourceClassifier:
    """Decides a source's capability and whether it should be ignored."""

    def classify(self, executable_name: str, kind: MediaSourceKind) -> MediaCapability:
        if self.should_ignore(executable_name):
            return MediaCapability.SYSTEM
        if kind.is_browser:
            return MediaCapability.BROWSER
        name = _lower(executable_name)
        if any(marker in name for marker in _STREAMING_MARKERS):
            return MediaCapability.STREAMING_APP
        if any(marker in name for marker in _PLAYER_MARKERS):
            return MediaCapability.DEDICATED_PLAYER
        return MediaCapability.UNKNOWN

    def should_ignore(self, executable_name: str) -> bool:
        name = _lower(executable_name)
        return name in _SYSTEM_PROCESSES or any(marker in name for marker in _IGNORED_MARKERS)