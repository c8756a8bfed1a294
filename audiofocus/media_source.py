"""Identity and classification of media sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_KIND_CATEGORIES = frozenset({"desktop_app", "browser", "store_app", "unknown"})


class BrowserFamily(Enum):
    CHROME = "chrome"
    EDGE = "edge"
    BRAVE = "brave"
    FIREFOX = "firefox"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class MediaSourceKind:
    """What sort of program a media source is; browsers carry their family."""

    category: str
    family: BrowserFamily | None = None

    def __post_init__(self) -> None:
        if self.category not in _KIND_CATEGORIES:
            raise ValueError(f"unknown media source kind {self.category!r}")
        if (self.category == "browser") != (self.family is not None):
            raise ValueError("a browser family is given exactly for browser kinds")

    @classmethod
    def browser(cls, family: BrowserFamily) -> MediaSourceKind:
        return cls("browser", family)

    @property
    def is_browser(self) -> bool:
        return self.family is not None

    def __str__(self) -> str:
        if self.family is not None:
            return f"browser:{self.family}"
        return self.category


MediaSourceKind.DESKTOP_APP = MediaSourceKind("desktop_app")
MediaSourceKind.STORE_APP = MediaSourceKind("store_app")
MediaSourceKind.UNKNOWN = MediaSourceKind("unknown")


class SourceType(Enum):
    SMTC = "smtc"
    NON_SMTC = "non_smtc"
    HYBRID = "hybrid"

    def __str__(self) -> str:
        return self.value


class MediaCapability(Enum):
    BROWSER = "browser"
    DEDICATED_PLAYER = "dedicated_player"
    STREAMING_APP = "streaming_app"
    SYSTEM = "system"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ProcessIdentity:
    """A process, told apart from later reuses of its id by creation time."""

    process_id: int
    creation_time: int = 0
    executable_path: str | None = None
    executable_name: str = ""
    package_full_name: str | None = None


@dataclass(frozen=True)
class MediaSource:
    """A program producing media, with a stable identifier."""

    id: str
    kind: MediaSourceKind
    source_type: SourceType
    capability: MediaCapability
    source_app_user_model_id: str
    process: ProcessIdentity | None = None

    @classmethod
    def unresolved(cls, source_app_user_model_id: str) -> MediaSource:
        """A transport-control source whose process could not be found."""
        normalized = normalize_component(source_app_user_model_id)
        return cls(
            id=f"smtc:unresolved:{normalized}",
            kind=MediaSourceKind.UNKNOWN,
            source_type=SourceType.SMTC,
            capability=MediaCapability.UNKNOWN,
            source_app_user_model_id=source_app_user_model_id,
            process=None,
        )


def _is_id_character(character: str) -> bool:
    return character.isascii() and (character.isalnum() or character in "._-")


def normalize_component(value: str) -> str:
    """Trim, lower-case ASCII and replace anything but [a-z0-9._-] with '_'."""
    lowered = "".join(
        character.lower() if character.isascii() else character
        for character in value.strip()
    )
    return "".join(
        character if _is_id_character(character) else "_" for character in lowered
    )