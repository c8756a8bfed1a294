"""Process inspection and matching of transport-control sessions to processes."""

from __future__ import annotations

import logging
import ntpath
import re
import string
from collections.abc import Iterable
from dataclasses import dataclass

import psutil

from .media_source import (
    BrowserFamily,
    MediaCapability,
    MediaSource,
    MediaSourceKind,
    ProcessIdentity,
    SourceType,
    normalize_component,
)

_log = logging.getLogger(__name__)

_FILETIME_EPOCH_OFFSET_SECONDS = 11_644_473_600
_FILETIME_TICKS_PER_SECOND = 10_000_000
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_PACKAGE_DIR = re.compile(r"[\\/]windowsapps[\\/]([^\\/]+)[\\/]", re.IGNORECASE)

_BROWSER_EXECUTABLES = {
    "chrome.exe": BrowserFamily.CHROME,
    "msedge.exe": BrowserFamily.EDGE,
    "brave.exe": BrowserFamily.BRAVE,
    "firefox.exe": BrowserFamily.FIREFOX,
}


def _ascii_lower(value: str) -> str:
    return value.translate(_ASCII_LOWER)


@dataclass(frozen=True)
class ProcessSnapshot:
    """What could be learned about a running process."""

    process_id: int
    creation_time: int = 0
    executable_path: str | None = None
    executable_name: str = ""
    package_full_name: str | None = None

    def identity(self) -> ProcessIdentity:
        return ProcessIdentity(
            process_id=self.process_id,
            creation_time=self.creation_time,
            executable_path=self.executable_path,
            executable_name=self.executable_name,
            package_full_name=self.package_full_name,
        )


class ProcessResolver:
    """Finds the process behind a transport-control application id."""

    def resolve_media_source(
        self,
        source_app_user_model_id: str,
        processes: Iterable[ProcessSnapshot] | None = None,
    ) -> MediaSource:
        if processes is None:
            processes = enumerate_processes()
        normalized_aumid = _ascii_lower(source_app_user_model_id)
        candidates = [
            process
            for process in processes
            if process_matches_aumid(process, normalized_aumid)
        ]
        if not candidates:
            return MediaSource.unresolved(source_app_user_model_id)
        matched = min(candidates, key=lambda process: process_rank(process, normalized_aumid))
        return media_source_from_process(source_app_user_model_id, matched)


def media_source_from_process(
    source_app_user_model_id: str, process: ProcessSnapshot
) -> MediaSource:
    """Build a source for a matched process; capability is classified later."""
    family = browser_family_for_exe(process.executable_name)
    if family is not None:
        kind = MediaSourceKind.browser(family)
        source_id = f"browser:{family}"
    elif process.package_full_name is not None:
        kind = MediaSourceKind.STORE_APP
        source_id = f"store:{normalize_component(process.package_full_name)}"
    else:
        kind = MediaSourceKind.DESKTOP_APP
        basis = (
            process.executable_path
            if process.executable_path is not None
            else process.executable_name
        )
        source_id = f"process:{normalize_component(basis)}"

    return MediaSource(
        id=source_id,
        kind=kind,
        source_type=SourceType.SMTC,
        capability=MediaCapability.UNKNOWN,
        source_app_user_model_id=source_app_user_model_id,
        process=process.identity(),
    )


def enumerate_processes() -> list[ProcessSnapshot]:
    """Snapshot every running process; empty if the process list is unavailable."""
    snapshots: list[ProcessSnapshot] = []
    try:
        for proc in psutil.process_iter(["name"]):
            fallback_name = proc.info.get("name") or ""
            snapshots.append(resolve_process(proc.pid, fallback_name))
    except psutil.Error as error:
        _log.warning("failed to create process snapshot for SMTC resolution: %s", error)
    return snapshots


def resolve_process(process_id: int, fallback_name: str) -> ProcessSnapshot:
    """Inspect one process, falling back to the given name where access fails."""
    try:
        proc = psutil.Process(process_id)
    except (psutil.Error, OSError):
        return ProcessSnapshot(
            process_id=process_id,
            creation_time=0,
            executable_path=None,
            executable_name=fallback_name,
            package_full_name=None,
        )

    executable_path = _image_path(proc)
    name = ntpath.basename(executable_path) if executable_path else ""
    return ProcessSnapshot(
        process_id=process_id,
        creation_time=_creation_time(proc),
        executable_path=executable_path,
        executable_name=name or fallback_name,
        package_full_name=_package_full_name(executable_path),
    )


def _creation_time(proc: psutil.Process) -> int:
    """Creation time in 100-nanosecond ticks since 1601, or 0 if unknown."""
    try:
        created = proc.create_time()
    except (psutil.Error, OSError):
        return 0
    return int((created + _FILETIME_EPOCH_OFFSET_SECONDS) * _FILETIME_TICKS_PER_SECOND)


def _image_path(proc: psutil.Process) -> str | None:
    try:
        path = proc.exe()
    except (psutil.Error, OSError):
        return None
    return path or None


def _package_full_name(executable_path: str | None) -> str | None:
    if not executable_path:
        return None
    match = _PACKAGE_DIR.search(executable_path)
    return match.group(1) if match else None


def _trim_exe_suffix(name: str) -> str:
    while name.endswith(".exe"):
        name = name[: -len(".exe")]
    return name


def process_matches_aumid(process: ProcessSnapshot, normalized_aumid: str) -> bool:
    exe = _ascii_lower(process.executable_name)
    package = _ascii_lower(process.package_full_name or "")
    path = _ascii_lower(process.executable_path or "")

    return (
        _trim_exe_suffix(exe) in normalized_aumid
        or (bool(package) and package in normalized_aumid)
        or _known_aumid_exe_match(normalized_aumid, exe)
        or _browser_aumid_matches_exe(normalized_aumid, exe)
        or (bool(path) and exe in normalized_aumid)
    )


def process_rank(process: ProcessSnapshot, normalized_aumid: str) -> int:
    """Lower is better: known or browser matches, then packaged apps, then others."""
    exe = _ascii_lower(process.executable_name)
    if _known_aumid_exe_match(normalized_aumid, exe) or _browser_aumid_matches_exe(
        normalized_aumid, exe
    ):
        return 0
    if process.package_full_name is not None:
        return 1
    return 2


def _known_aumid_exe_match(normalized_aumid: str, exe: str) -> bool:
    return (exe == "spotify.exe" and "spotify" in normalized_aumid) or (
        exe == "netflix.exe" and "netflix" in normalized_aumid
    )


def _browser_aumid_matches_exe(normalized_aumid: str, exe: str) -> bool:
    """True only when the hint names the same browser family as the executable."""
    family = browser_family_for_exe(exe)
    if family is BrowserFamily.CHROME:
        return "chrome" in normalized_aumid or "youtube" in normalized_aumid
    if family is BrowserFamily.EDGE:
        return any(
            hint in normalized_aumid for hint in ("edge", "microsoftedge", "microsoft.edge")
        )
    if family is BrowserFamily.BRAVE:
        return "brave" in normalized_aumid
    if family is BrowserFamily.FIREFOX:
        return "firefox" in normalized_aumid
    return False


def browser_family_for_exe(executable_name: str) -> BrowserFamily | None:
    return _BROWSER_EXECUTABLES.get(_ascii_lower(executable_name))